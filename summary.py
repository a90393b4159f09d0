"""Plain-text report for a Statistics aggregate."""

from __future__ import annotations

from collections import Counter

from aggregator import Statistics

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def generate_summary(stats: Statistics, top_n: int = 10) -> str:
    """
    Generate the report text.

    Args:
        stats: Aggregate for one source
        top_n: Number of top items to show in each section

    Returns:
        Formatted summary text
    """
    lines = []
    lines.extend(_generate_header(stats))
    lines.extend(_generate_projects(stats, top_n))
    lines.extend(_generate_usage(stats, top_n))
    lines.extend(_generate_activity(stats, top_n))
    return "\n".join(lines)


def _generate_header(stats: Statistics) -> list[str]:
    s = stats.summary
    label = stats.source_label or stats.source or "unknown"
    cost_note = " (estimated from tokens)" if stats.cost_estimated else ""
    days = sorted(stats.daily_activity)
    time_range = f"{days[0]} to {days[-1]}" if days else "Unknown"

    return [
        "=" * 70,
        f"{label.upper()} USAGE SUMMARY",
        "=" * 70,
        "",
        f"Sessions: {s.total_sessions:,}",
        f"Messages: {s.total_messages:,} ({s.total_user_messages:,} from user)",
        f"Cost: ${s.total_cost:,.2f}{cost_note}",
        f"Active days: {s.active_days}",
        f"Time in sessions: {s.total_duration_minutes / 60:,.1f} h",
        f"Projects: {s.projects}",
        f"Time range: {time_range}",
        "",
    ]


def _generate_projects(stats: Statistics, top_n: int) -> list[str]:
    lines = [
        "=" * 70,
        "TOP PROJECTS BY COST",
        "=" * 70,
        "",
    ]
    ranked = sorted(
        stats.project_stats.items(), key=lambda kv: (-kv[1].cost, kv[0])
    )[:top_n]
    for name, ps in ranked:
        lines.append(
            f"  ${ps.cost:9.2f}  {ps.sessions:4d} sessions  "
            f"{ps.user_messages:5d} prompts  {name}"
        )
    if not ranked:
        lines.append("  (no sessions)")
    lines.append("")
    return lines


def _generate_usage(stats: Statistics, top_n: int) -> list[str]:
    lines = ["Models (sessions using each):"]
    for model, count in Counter(stats.model_usage).most_common(top_n):
        lines.append(f"  {count:5d}  {model}")
    if stats.thinking_usage:
        lines.extend(["", "Thinking levels:"])
        for level, count in Counter(stats.thinking_usage).most_common(top_n):
            lines.append(f"  {count:5d}  {level}")
    lines.append("")
    return lines


def _generate_activity(stats: Statistics, top_n: int) -> list[str]:
    """Busiest weekday/hour slots from the punchcard."""
    slots = Counter()
    for day, row in enumerate(stats.punchcard):
        for hour, count in enumerate(row):
            if count:
                slots[(day, hour)] = count

    lines = ["Busiest hours (local time):"]
    for (day, hour), count in slots.most_common(top_n):
        lines.append(f"  {count:5d}  {DAY_NAMES[day]} {hour:02d}:00")
    if not slots:
        lines.append("  (no user messages)")
    lines.append("")
    return lines
