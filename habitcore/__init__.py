"""habitscore core library: day keys, scoring, completion gating and streaks.

Public API re-exports for convenient imports:
    from habitcore import to_day_key, contribution_raw, compute_day_summary, ...
"""

# Day keys
from habitcore.dates import (
    parse_day_start,
    to_day_key,
    is_future,
    shift_day_key,
)

# Models
from habitcore.models import (
    Habit,
    LogSession,
    DailyEntry,
    HabitBreakdown,
    DaySummary,
    StreakStats,
    Settings,
    finite_or_none,
)

# Legacy shapes
from habitcore.legacy import (
    DimensionRule,
    ScoringProfile,
    EntryReading,
    scoring_profile,
    read_entry,
)

# Scoring
from habitcore.score import (
    contribution_raw,
    compute_day_summary,
    daily_scores,
)

# Completion
from habitcore.completion import (
    NextEntry,
    meets_completion_thresholds,
    requires_value_for_completion,
    compute_next_entry_on_set_value,
)

# Streaks
from habitcore.streaks import (
    completed_done,
    score_done,
    get_done_test,
    streak_by_habit,
    cold_streak_by_habit,
    done_ever_by_habit,
    compute_streak_stats,
    streak_segments,
    longest_streak,
)

# Trends
from habitcore.trends import (
    enumerate_date_keys,
    start_of_iso_week,
    end_of_iso_week,
    group_by_iso_week,
    rolling_average,
)

# Workspace & report
from habitcore.workspace import (
    workspace_root,
    load_settings,
    get_user_timezone,
    today_key,
)
from habitcore.report import (
    load_habits,
    load_entries,
    build_report,
    refresh_summary,
    load_summary,
)
