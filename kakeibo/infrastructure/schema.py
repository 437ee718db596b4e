"""Table definitions for the household finance database.

Statements are portable between PostgreSQL and SQLite and are safe to
run repeatedly.
"""

from kakeibo.application.ports.database import DatabaseEnginePort

CREATE_MONTHLY_ASSET_RECORDS_SQL = """
CREATE TABLE IF NOT EXISTS monthly_asset_records (
    user_id TEXT NOT NULL,
    year_month TEXT NOT NULL,
    bank_balance BIGINT NOT NULL DEFAULT 0,
    monthly_income BIGINT NOT NULL DEFAULT 0,
    credit_expenses BIGINT NOT NULL DEFAULT 0,
    nisa_value BIGINT NOT NULL DEFAULT 0,
    calculated_balance BIGINT NOT NULL DEFAULT 0,
    is_confirmed BOOLEAN NOT NULL DEFAULT FALSE,
    notes TEXT,
    bank_details TEXT,
    income_details TEXT,
    credit_details TEXT,
    nisa_details TEXT,
    PRIMARY KEY (user_id, year_month)
)
"""

CREATE_INCOME_RECORDS_SQL = """
CREATE TABLE IF NOT EXISTS income_records (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    amount BIGINT NOT NULL DEFAULT 0,
    frequency TEXT NOT NULL DEFAULT 'monthly',
    is_active BOOLEAN NOT NULL DEFAULT TRUE
)
"""

CREATE_USER_SETTINGS_SQL = """
CREATE TABLE IF NOT EXISTS user_settings (
    user_id TEXT PRIMARY KEY,
    default_credit_cards TEXT
)
"""

CREATE_NISA_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS nisa_accounts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    current_value BIGINT NOT NULL DEFAULT 0,
    monthly_contribution BIGINT NOT NULL DEFAULT 0,
    is_active BOOLEAN NOT NULL DEFAULT TRUE
)
"""

CREATE_SAVINGS_GOALS_SQL = """
CREATE TABLE IF NOT EXISTS savings_goals (
    user_id TEXT NOT NULL,
    period TEXT NOT NULL,
    target_amount BIGINT NOT NULL DEFAULT 0,
    nisa_monthly BIGINT NOT NULL DEFAULT 0,
    nisa_yield_rate NUMERIC NOT NULL DEFAULT 0,
    bonus_per_year BIGINT NOT NULL DEFAULT 0,
    bonus_frequency INTEGER NOT NULL DEFAULT 0,
    monthly_savings BIGINT NOT NULL DEFAULT 0,
    is_active BOOLEAN NOT NULL DEFAULT TRUE,
    PRIMARY KEY (user_id, period)
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    budget BIGINT NOT NULL DEFAULT 0,
    is_fixed BOOLEAN NOT NULL DEFAULT FALSE,
    display_order INTEGER NOT NULL DEFAULT 0
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    category_id TEXT,
    amount BIGINT NOT NULL,
    expense_date DATE NOT NULL,
    memo TEXT
)
"""

SCHEMA_STATEMENTS = (
    CREATE_MONTHLY_ASSET_RECORDS_SQL,
    CREATE_INCOME_RECORDS_SQL,
    CREATE_USER_SETTINGS_SQL,
    CREATE_NISA_ACCOUNTS_SQL,
    CREATE_SAVINGS_GOALS_SQL,
    CREATE_CATEGORIES_SQL,
    CREATE_EXPENSES_SQL,
)


def ensure_schema(db_port: DatabaseEnginePort) -> int:
    """Create every kakeibo table that does not exist yet.

    Args:
        db_port: Port providing access to the finance engine.

    Returns:
        int: Number of statements executed.
    """
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)
    return len(SCHEMA_STATEMENTS)


__all__ = ["SCHEMA_STATEMENTS", "ensure_schema"]
