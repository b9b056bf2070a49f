# app/schemas/__init__.py
from .subsidy import (
    SubsidyErrorResponse,
    SubsidyFoundResponse,
    SubsidyManualResponse
)
