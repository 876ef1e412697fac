"""
Application configuration and constants.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# API configuration
API_VERSION = "1.0.0"
API_TITLE = "Retirement Projection API"
API_DESCRIPTION = "Deterministic year-by-year retirement projection with college cost amortization"

# CORS configuration
CORS_ORIGINS = ["*"]  # In production, replace with specific origins
CORS_CREDENTIALS = True
CORS_METHODS = ["*"]
CORS_HEADERS = ["*"]

# Form defaults (used when no persisted setting exists)
DEFAULT_INITIAL_AGE = 18
DEFAULT_RETIREMENT_AGE = 67
DEFAULT_MAX_AGE = 92
DEFAULT_INFLATION_RATE = 0.03
DEFAULT_ANNUAL_GROWTH_RATE = 0.05
DEFAULT_NUM_KIDS = 2
DEFAULT_COLLEGE_COST = 50000.0
DEFAULT_COLLEGE_DURATION = 4

# Input bounds
MAX_AGE_LIMIT = 150
MAX_COUNT_LIMIT = 100  # kids, college years

# Projection policy
PRE_RETIREMENT_GIVING_RATE = 0.10
POST_RETIREMENT_GIVING_RATE = 0.20
RETIREMENT_SPENDING_FACTOR = 0.8  # 20% spending cut from retirement age on
MONTHS_PER_YEAR = 12

# Table / export configuration
CSV_COLUMNS: List[str] = [
    "year",
    "age",
    "portfolioValue",
    "portfolioGrowth",
    "netJobIncome",
    "passiveIncome",
    "totalIncome",
    "charitableGiving",
    "spendingNeed",
    "investmentExpenses",
    "surplusDeficit",
]
CSV_FILENAME = "retirement_projection.csv"
DEFAULT_CHART_FIELDS: List[str] = ["portfolioValue", "totalIncome", "spendingNeed"]

# Persistence
DATABASE_URL = os.getenv("DATABASE_URL", "")  # empty -> sqlite file under data/

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
