import logging
from datetime import datetime

from fastapi import APIRouter, Depends

from rundash.agg import (
    build_training_plan,
    max_goal_miles,
    phase_sections,
    plan_totals,
)
from rundash.app.constants import (
    TRAINING_END,
    TRAINING_START,
    TRAINING_SUBTITLE,
    TRAINING_TITLE,
)
from rundash.app.dependencies import DashboardSnapshot, current_time, dashboard_snapshot
from rundash.app.models import TrainingPlanResponse, TrainingWeekResponse
from rundash.models import Activity

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/training", tags=["training"])


def build_training_response(
    activities: list[Activity], now: datetime
) -> TrainingPlanResponse:
    """Aggregate the training plan and flag each week against `now`."""
    weeks = build_training_plan(activities, TRAINING_START, TRAINING_END)
    total_miles, total_runs = plan_totals(weeks)
    max_goal = max_goal_miles(weeks)

    week_responses = []
    for _, section in phase_sections(weeks):
        # Only the first week of each phase carries the phase header.
        for i, week in enumerate(section):
            week_responses.append(
                TrainingWeekResponse.from_week(
                    week,
                    now=now,
                    max_goal_miles=max_goal,
                    show_phase_header=i == 0,
                )
            )

    logger.debug(
        f"Built training plan of {len(weeks)} weeks: "
        f"{total_miles:.1f} miles over {total_runs} runs"
    )
    return TrainingPlanResponse(
        title=TRAINING_TITLE,
        subtitle=TRAINING_SUBTITLE,
        weeks=week_responses,
        total_miles=total_miles,
        total_runs=total_runs,
        max_goal_miles=max_goal,
    )


@router.get("", response_model=TrainingPlanResponse)
def get_training_plan(
    snapshot: DashboardSnapshot = Depends(dashboard_snapshot),
    now: datetime = Depends(current_time),
) -> TrainingPlanResponse:
    """Get the week-by-week progress through the training plan."""
    return build_training_response(snapshot.data.activities, now)
