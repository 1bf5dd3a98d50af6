# backend/hrdash/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Ensure all SQLAlchemy models are registered on Base.metadata
import hrdash.models  # noqa: F401

from hrdash.api import employees, promotion_history, promotion_schedule, salary_adjustments
from hrdash.api.system import router as system_router
from hrdash.config import get_settings
from hrdash.errors import register_exception_handlers
from hrdash.log import init_logging

settings = get_settings()
init_logging(settings.log_level)

app = FastAPI(title=settings.app_name, version=settings.app_version)

# --- CORS for the dashboard frontend ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Routers (procedures are addressed by name, e.g. POST /createEmployee)
app.include_router(system_router)                # /healthcheck, /health, /version
app.include_router(employees.router)             # createEmployee, getEmployees, getEmployeeById, updateEmployee
app.include_router(promotion_history.router)     # createPromotionHistory, getPromotionHistoryByEmployee
app.include_router(salary_adjustments.router)    # createSalaryAdjustment, getSalaryAdjustmentsByEmployee
app.include_router(promotion_schedule.router)    # create/updatePromotionSchedule, getAll..., getUpcomingPromotions
