import csv
import json
from io import StringIO
from pathlib import Path

from fastapi import FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates

from .analyzer import FinancialAnalyzer
from .formatting import format_amount
from .loader import load_transactions
from .log import configure_logging, get_logger
from .logic import validate_type
from .parser import Err, parse
from .settings import Settings, get_settings

logger = get_logger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _analyze_data_file(settings: Settings) -> FinancialAnalyzer:
    result = load_transactions(settings.data_path)
    return FinancialAnalyzer(result.unwrap())


def _analyze_payload(payload) -> FinancialAnalyzer:
    result = parse(payload)
    if isinstance(result, Err):
        raise HTTPException(status_code=400, detail=result.error.message)
    return FinancialAnalyzer(result.value)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="txn-summary")
    app.state.settings = settings
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["money"] = lambda value: format_amount(
        value, settings.currency
    )

    def _context(request: Request, source: str, analyzer=None, error=None) -> dict:
        return {
            "request": request,
            "source": source,
            "summary": analyzer.summary() if analyzer else None,
            "error": error,
        }

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        source = str(settings.data_path)
        try:
            analyzer = _analyze_data_file(settings)
        except ValueError as exc:
            logger.warning("cannot summarise %s: %s", source, exc)
            return templates.TemplateResponse(
                request, "index.html", _context(request, source, error=str(exc))
            )
        return templates.TemplateResponse(
            request, "index.html", _context(request, source, analyzer)
        )

    @app.post("/analyze", response_class=HTMLResponse)
    def analyze(request: Request, payload: str = Form(...)):
        try:
            raw = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise HTTPException(
                status_code=400, detail=f"payload is not valid JSON: {exc.msg}"
            ) from exc
        context = _context(request, "submitted payload", _analyze_payload(raw))
        if request.headers.get("HX-Request") == "true":
            return templates.TemplateResponse(request, "_summary.html", context)
        return templates.TemplateResponse(request, "index.html", context)

    @app.post("/api/summary")
    async def api_summary(request: Request):
        try:
            raw = await request.json()
        except json.JSONDecodeError as exc:
            raise HTTPException(
                status_code=400, detail=f"body is not valid JSON: {exc.msg}"
            ) from exc
        return _analyze_payload(raw).summary()

    @app.get("/export.csv")
    def export_csv(txn_type: str = Query("expense", alias="type")):
        try:
            txn_type = validate_type(txn_type)
            analyzer = _analyze_data_file(settings)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        output = StringIO()
        writer = csv.writer(output)
        writer.writerow(["category", "amount"])
        for category, amount in analyzer.category_breakdown(txn_type).items():
            writer.writerow([category, f"{amount:.2f}"])

        body = "\ufeff" + output.getvalue()
        filename = f"{txn_type.value}-by-category.csv"
        return Response(
            content=body,
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app
