# backend/hrdash/models/__init__.py
"""
Model registry. Import this once at startup so SQLAlchemy sees all mapped
classes and the foreign keys resolve.
"""
from hrdash.db import Base  # noqa: F401  # re-export Base

from .employee import Employee  # noqa: F401
from .promotion_history import PromotionHistory  # noqa: F401
from .salary_adjustment import AdjustmentType, SalaryAdjustment  # noqa: F401
from .promotion_schedule import OPEN_STATUSES, PromotionSchedule, PromotionStatus  # noqa: F401
