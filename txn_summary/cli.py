"""Command line entry point.

``txn-summary [summary] [PATH]`` prints the balance, both category breakdowns
and the most expensive transaction of a JSON transactions file.
``txn-summary serve`` starts the web app with uvicorn.
"""
import argparse
import json
import sys

from .analyzer import FinancialAnalyzer
from .errors import TxnSummaryError
from .formatting import format_amount
from .loader import load_transactions
from .log import configure_logging, get_logger
from .models import TransactionType
from .parser import Err
from .settings import Settings, get_settings

logger = get_logger(__name__)


def _print_breakdown(title: str, breakdown: dict, currency: str) -> None:
    print(f"{title}:")
    if not breakdown:
        print("  (none)")
        return
    width = max(len(category) for category in breakdown)
    for category, amount in breakdown.items():
        print(f"  {category:<{width}}  {format_amount(amount, currency)}")


def print_summary(analyzer: FinancialAnalyzer, currency: str = "$") -> None:
    print(f"Balance: {format_amount(analyzer.total_balance(), currency)}")
    _print_breakdown(
        "Income by category",
        analyzer.category_breakdown(TransactionType.INCOME),
        currency,
    )
    _print_breakdown(
        "Expenses by category",
        analyzer.category_breakdown(TransactionType.EXPENSE),
        currency,
    )
    txn = analyzer.most_expensive_transaction()
    if txn is None:
        print("Most expensive transaction: none")
    else:
        print(
            f"Most expensive transaction: #{txn.id} {txn.category} "
            f"{format_amount(txn.amount, currency)} on {txn.date.date().isoformat()}"
        )


def cmd_summary(settings: Settings, path: str | None, as_json: bool) -> int:
    try:
        result = load_transactions(path or settings.data_path)
    except TxnSummaryError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    if isinstance(result, Err):
        print(f"error: {result.error.message}", file=sys.stderr)
        return 1

    analyzer = FinancialAnalyzer(result.value)
    if as_json:
        print(json.dumps(analyzer.summary(), indent=2))
    else:
        print_summary(analyzer, settings.currency)
    return 0


def cmd_serve(settings: Settings, host: str, port: int) -> int:
    import uvicorn

    from .main import create_app

    logger.info("starting server on %s:%d", host, port)
    uvicorn.run(create_app(settings), host=host, port=port)
    return 0


COMMANDS = ("summary", "serve")


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", default=None)

    parser = argparse.ArgumentParser(prog="txn-summary")
    sub = parser.add_subparsers(dest="command", required=True)

    summary = sub.add_parser(
        "summary", parents=[common], help="summarise a transactions file"
    )
    summary.add_argument("path", nargs="?", default=None)
    summary.add_argument("--json", action="store_true", dest="as_json")

    serve = sub.add_parser("serve", parents=[common], help="run the web app")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    # a bare invocation or a leading path means "summary"
    if not argv or argv[0] not in (*COMMANDS, "-h", "--help"):
        argv.insert(0, "summary")

    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    if args.command == "summary":
        return cmd_summary(settings, args.path, args.as_json)
    return cmd_serve(settings, args.host, args.port)
