from __future__ import annotations

from datetime import date
from pathlib import Path

from fastapi import Depends, FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .calculations import PayrollSummary, WorkInterval, month_grid
from .config import settings
from .exceptions import SigeupError
from .formatting import (
    WEEKDAY_LABELS,
    day_title,
    format_amount,
    format_hours,
    month_title,
    time_to_str,
)
from .schemas import (
    PayrollSummaryOut,
    WageIn,
    WorkEntryIn,
    WorkEntryList,
    WorkEntryOut,
)
from .session import CalculatorSession


BASE_DIR = Path(__file__).resolve().parents[2]  # .../sigeup/
FRONTEND_DIR = BASE_DIR / "frontend"

templates = Jinja2Templates(directory=str(FRONTEND_DIR / "templates"))
templates.env.filters["amount"] = lambda v: format_amount(v, settings.currency_suffix)
templates.env.filters["hours"] = format_hours
templates.env.filters["hhmm"] = time_to_str


def parse_day(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail="Invalid date") from exc


def get_session(request: Request) -> CalculatorSession:
    return request.app.state.session


def entry_out(wi: WorkInterval) -> WorkEntryOut:
    return WorkEntryOut(
        date=wi.day,
        start_time=time_to_str(wi.start_time),
        end_time=time_to_str(wi.end_time),
        hours=wi.hours,
    )


def summary_out(summary: PayrollSummary) -> PayrollSummaryOut:
    return PayrollSummaryOut(
        total_hours=summary.total_hours,
        total_days=summary.total_days,
        basic_pay=summary.basic_pay,
        weekly_holiday_pay=summary.weekly_holiday_pay,
        total_pay=summary.total_pay,
        eligible_weeks=summary.eligible_weeks,
        total_weeks=summary.total_weeks,
    )


def calculator_context(session: CalculatorSession, warning: str | None = None) -> dict:
    leading_blanks, days = month_grid(session.month)
    return {
        "title": settings.app_name,
        "hourly_wage": session.hourly_wage,
        "month": session.month.isoformat(),
        "month_title": month_title(session.month),
        "weekday_labels": WEEKDAY_LABELS,
        "leading_blanks": leading_blanks,
        "days": [
            {
                "date": d.isoformat(),
                "day": d.day,
                "selected": d == session.selected_date,
                "has_work": d in session.schedule,
            }
            for d in days
        ],
        "selected_date": (
            session.selected_date.isoformat() if session.selected_date else None
        ),
        "selected_title": (
            day_title(session.selected_date) if session.selected_date else None
        ),
        "start_time": session.start_input,
        "end_time": session.end_input,
        "entries": list(session.schedule),
        "summary": session.summary,
        "warning": warning,
    }


def render_calculator(session: CalculatorSession, warning: str | None = None) -> HTMLResponse:
    html = templates.get_template("partials/calculator.html").render(
        **calculator_context(session, warning)
    )
    resp = HTMLResponse(html)
    resp.headers["HX-Trigger"] = "schedule:changed"
    return resp


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, debug=settings.debug)
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR / "static"), name="static")

    app.state.session = CalculatorSession(
        hourly_wage=settings.default_hourly_wage,
        min_hours=settings.weekly_holiday_min_hours,
    )

    @app.exception_handler(SigeupError)
    def _domain_error(request: Request, exc: SigeupError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # -- HTML ----------------------------------------------------------------

    @app.get("/", response_class=HTMLResponse)
    def calculator_page(request: Request, session: CalculatorSession = Depends(get_session)):
        return templates.TemplateResponse(
            request,
            "calculator.html",
            calculator_context(session),
        )

    @app.post("/wage", response_class=HTMLResponse)
    def update_wage(
        hourly_wage: str = Form(""),
        session: CalculatorSession = Depends(get_session),
    ):
        session.set_wage(hourly_wage)
        return render_calculator(session)

    @app.post("/month/prev", response_class=HTMLResponse)
    def prev_month(session: CalculatorSession = Depends(get_session)):
        session.prev_month()
        return render_calculator(session)

    @app.post("/month/next", response_class=HTMLResponse)
    def next_month(session: CalculatorSession = Depends(get_session)):
        session.next_month()
        return render_calculator(session)

    @app.post("/select", response_class=HTMLResponse)
    def select_day(
        date_str: str = Form(..., alias="date"),
        session: CalculatorSession = Depends(get_session),
    ):
        day = parse_day(date_str)
        if day is None:
            raise HTTPException(status_code=400, detail="Date required")
        session.select_date(day)
        return render_calculator(session)

    @app.post("/entries", response_class=HTMLResponse)
    def save_entry(
        date_str: str | None = Form(None, alias="date"),
        start_time: str | None = Form(None),
        end_time: str | None = Form(None),
        session: CalculatorSession = Depends(get_session),
    ):
        day = parse_day(date_str)
        if day is not None:
            session.select_date(day)
        session.set_times(start_time, end_time)

        try:
            session.add_entry()
        except SigeupError as exc:
            return render_calculator(session, warning=exc.message)
        return render_calculator(session)

    @app.post("/entries/delete", response_class=HTMLResponse)
    def delete_entry(
        date_str: str = Form(..., alias="date"),
        session: CalculatorSession = Depends(get_session),
    ):
        day = parse_day(date_str)
        if day is not None:
            session.remove_entry(day)
        return render_calculator(session)

    # -- JSON API ------------------------------------------------------------

    @app.get("/api/entries", response_model=WorkEntryList)
    def api_entries(session: CalculatorSession = Depends(get_session)):
        return WorkEntryList(items=[entry_out(wi) for wi in session.schedule])

    @app.post("/api/entries", response_model=WorkEntryOut)
    def api_add_entry(payload: WorkEntryIn, session: CalculatorSession = Depends(get_session)):
        wi = session.add_entry(payload.date, payload.start_time, payload.end_time)
        return entry_out(wi)

    @app.delete("/api/entries/{day}")
    def api_delete_entry(day: date, session: CalculatorSession = Depends(get_session)):
        return {"deleted": session.remove_entry(day)}

    @app.put("/api/wage", response_model=PayrollSummaryOut | None)
    def api_set_wage(payload: WageIn, session: CalculatorSession = Depends(get_session)):
        summary = session.set_wage(payload.hourly_wage)
        return summary_out(summary) if summary else None

    @app.get("/api/summary", response_model=PayrollSummaryOut | None)
    def api_summary(session: CalculatorSession = Depends(get_session)):
        summary = session.recompute()
        return summary_out(summary) if summary else None

    return app


app = create_app()
