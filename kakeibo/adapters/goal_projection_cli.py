"""CLI adapter saving savings goals and printing their projections."""

import os

from kakeibo.adapters.formatting import format_yen, format_yen_short
from kakeibo.application.session import UserSession
from kakeibo.domain.errors import KakeiboError
from kakeibo.domain.models import GoalProjection, SavingsGoal
from kakeibo.domain.services.projection import per_bonus_amount
from kakeibo.infrastructure.container import (
    build_database_adapter,
    build_goal_projection_use_case,
    build_list_goal_projections_use_case,
    build_save_savings_goal_use_case,
)
from kakeibo.infrastructure.logging.logger import get_app_logger
from kakeibo.infrastructure.settings import KakeiboSettings

_ACTIONS = ("show", "list", "save")


def render_projection(projection: GoalProjection) -> list[str]:
    """Return the lines describing a projection."""
    lines = [
        f"{projection.period} goal: target {format_yen(projection.target_amount)}",
        f"  NISA      {format_yen(projection.nisa_total)}",
        f"  Bonus     {format_yen(projection.bonus_total)}",
        f"  Monthly   {format_yen(projection.monthly_total)}",
        f"  Total     {format_yen(projection.total)} "
        f"({projection.achievement_rate}%)",
        "  Milestones:",
    ]
    lines.extend(
        f"    month {milestone.month:>3}: {format_yen_short(milestone.total)}"
        for milestone in projection.milestones
    )
    lines.append("  Long term:")
    lines.extend(
        f"    {item.years:>2} years: {format_yen_short(item.amount)}"
        for item in projection.long_term
    )
    return lines


def render_goal(goal: SavingsGoal) -> list[str]:
    """Return the lines echoing a stored goal."""
    return [
        f"Saved {goal.period} goal: target {format_yen(goal.target_amount)}",
        f"  NISA      {format_yen(goal.nisa_monthly)}/month "
        f"at {goal.nisa_yield_rate:g}%",
        f"  Bonus     {format_yen(per_bonus_amount(goal))} "
        f"x {goal.bonus_frequency}/year",
        f"  Monthly   {format_yen(goal.monthly_savings)}",
    ]


def _int_env(name: str, default: int | None = None) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw.replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"{name} must be a whole number, got '{raw}'.") from exc


def _float_env(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got '{raw}'.") from exc


def _save_goal(db_adapter, session: UserSession, period: str) -> list[str]:
    target_amount = _int_env("GOAL_TARGET")
    if target_amount is None:
        raise ValueError("GOAL_TARGET is required to save a goal.")
    use_case = build_save_savings_goal_use_case(db_adapter)
    goal = use_case.execute(
        session,
        period,
        target_amount,
        nisa_monthly=_int_env("GOAL_NISA_MONTHLY", 0),
        nisa_yield_rate=_float_env("GOAL_YIELD"),
        bonus_per_occurrence=_int_env("GOAL_BONUS", 0),
        bonus_frequency=_int_env("GOAL_BONUS_FREQUENCY"),
        monthly_savings=_int_env("GOAL_MONTHLY_SAVINGS"),
    )
    return render_goal(goal)


def main() -> None:
    """Run GOAL_ACTION (show, list or save) for GOAL_PERIOD.

    ``show`` prints the projection of GOAL_PERIOD (default 1year),
    ``list`` prints every saved goal and ``save`` stores GOAL_TARGET
    with the optional GOAL_NISA_MONTHLY, GOAL_YIELD, GOAL_BONUS,
    GOAL_BONUS_FREQUENCY and GOAL_MONTHLY_SAVINGS values.
    """
    logger = get_app_logger()
    settings = KakeiboSettings.from_env()
    if settings.user_id is None:
        logger.warning("KAKEIBO_USER_ID is required.")
        return
    action = os.getenv("GOAL_ACTION", "show").strip().lower()
    if action not in _ACTIONS:
        logger.warning(
            f"Unknown GOAL_ACTION '{action}'. Expected one of {', '.join(_ACTIONS)}."
        )
        return
    period = os.getenv("GOAL_PERIOD", "1year").strip()
    session = UserSession(settings.user_id)

    db_adapter = build_database_adapter()
    try:
        if action == "save":
            lines = _save_goal(db_adapter, session, period)
        elif action == "list":
            use_case = build_list_goal_projections_use_case(db_adapter)
            projections = use_case.execute(session)
            if not projections:
                lines = ["No savings goals saved yet."]
            else:
                lines = [
                    line
                    for projection in projections
                    for line in render_projection(projection)
                ]
        else:
            use_case = build_goal_projection_use_case(db_adapter)
            lines = render_projection(use_case.execute(session, period))
    except (KakeiboError, ValueError) as exc:
        logger.error(str(exc))
        print(str(exc))
        return

    for line in lines:
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
