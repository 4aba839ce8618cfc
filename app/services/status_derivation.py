# app/services/status_derivation.py
"""
Vehicle status derivation for one (vehicle, date, shift).

Combines three signals into exactly one OperatingStatus:
  - a manual override for the key (operator judgment)
  - an approved operational report for the key (evidence of work)
  - vehicle lifecycle facts (first operational date, roster membership)

The precedence lives in STATUS_RULES, checked top to bottom, first match wins:

  1. override              → override status verbatim
  2. not_yet_operational   → not_active   (before the vehicle ever operated)
  3. approved_report       → running
  4. not_yet_due           → offline      (today or future, nothing reported yet)
  5. left_roster           → swapped      (past gap, vehicle no longer in roster)
  6. default               → stopped

Order matters: a pre-onboarding gap of a retired vehicle is not_active, not swapped.
Pure functions, no I/O, never raises on well-formed input.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from app.config import settings
from app.services.operating_status import ApprovalState, OperatingStatus
from app.services.records import OverrideFacts, ReportFacts, VehicleFacts

_STATUS_VALUES = frozenset(s.value for s in OperatingStatus)


@dataclass(frozen=True)
class StatusContext:
    vehicle: VehicleFacts
    on_date: date
    shift: str
    today: date
    override: Optional[OverrideFacts] = None
    approved_report: Optional[ReportFacts] = None


@dataclass(frozen=True)
class StatusRule:
    name: str
    applies: Callable[[StatusContext], bool]
    resolve: Callable[[StatusContext], OperatingStatus]


@dataclass(frozen=True)
class StatusDecision:
    status: OperatingStatus
    rule: str


def _has_override(ctx: StatusContext) -> bool:
    # Rows holding a value outside the status set (legacy "not_running" etc.) are ignored
    if ctx.override is None:
        return False
    status = ctx.override.status
    return getattr(status, "value", status) in _STATUS_VALUES


def _not_yet_operational(ctx: StatusContext) -> bool:
    first = ctx.vehicle.first_operational_date
    if first is None:
        # Never reported. A report for this very key would contradict that, so let it count.
        return not _has_approved_report(ctx)
    return ctx.on_date < first


def _has_approved_report(ctx: StatusContext) -> bool:
    return (ctx.approved_report is not None
            and ctx.approved_report.approval_state == ApprovalState.APPROVED.value)


def _not_yet_due(ctx: StatusContext) -> bool:
    return ctx.on_date >= ctx.today


def _left_roster(ctx: StatusContext) -> bool:
    return not ctx.vehicle.active_in_roster


STATUS_RULES = (
    StatusRule("override", _has_override, lambda ctx: OperatingStatus(ctx.override.status)),
    StatusRule("not_yet_operational", _not_yet_operational, lambda ctx: OperatingStatus.NOT_ACTIVE),
    StatusRule("approved_report", _has_approved_report, lambda ctx: OperatingStatus.RUNNING),
    StatusRule("not_yet_due", _not_yet_due, lambda ctx: OperatingStatus.OFFLINE),
    StatusRule("left_roster", _left_roster, lambda ctx: OperatingStatus.SWAPPED),
    StatusRule("default", lambda ctx: True, lambda ctx: OperatingStatus.STOPPED),
)


def business_today(now) -> date:
    """Calendar day of `now`. Aware datetimes are read in the configured business timezone."""
    if isinstance(now, datetime):
        if now.tzinfo is not None:
            return now.astimezone(ZoneInfo(settings.TIMEZONE)).date()
        return now.date()
    return now


def explain_status(vehicle: VehicleFacts, on_date: date, shift: str, now,
                   override: Optional[OverrideFacts] = None,
                   approved_report: Optional[ReportFacts] = None) -> StatusDecision:
    """Derive the status and name the rule that produced it."""
    ctx = StatusContext(
        vehicle=vehicle,
        on_date=on_date,
        shift=shift,
        today=business_today(now),
        override=override,
        approved_report=approved_report,
    )
    rule = next((r for r in STATUS_RULES[:-1] if r.applies(ctx)), STATUS_RULES[-1])
    return StatusDecision(status=rule.resolve(ctx), rule=rule.name)


def derive_status(vehicle: VehicleFacts, on_date: date, shift: str, now,
                  override: Optional[OverrideFacts] = None,
                  approved_report: Optional[ReportFacts] = None) -> OperatingStatus:
    return explain_status(vehicle, on_date, shift, now, override, approved_report).status


def business_now() -> datetime:
    """Current time in the configured business timezone."""
    return datetime.now(ZoneInfo(settings.TIMEZONE))
