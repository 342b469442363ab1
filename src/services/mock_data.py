"""
Mock market data for the dashboard panel: price chart, recent activity, stats.
Pure presentation support; nothing here touches the balance or contacts.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

_CHART_DAYS = 30
_START_PRICE = 1.25

_ACTIVITY_TEMPLATES: list[tuple[str, str]] = [
    ("Recompensa de staking", "gain"),
    ("Transferência recebida", "gain"),
    ("Bônus de reputação", "gain"),
    ("Transferência enviada", "loss"),
    ("Taxa de rede", "loss"),
]


@dataclass(frozen=True)
class ChartPoint:
    date: str
    value: float


@dataclass(frozen=True)
class Activity:
    id: int
    description: str
    amount: float
    type: str
    timestamp: str


@dataclass(frozen=True)
class Stats:
    market_cap: str
    holders: str
    transactions: str
    change: float


@dataclass(frozen=True)
class MockData:
    chart_data: list[ChartPoint] = field(default_factory=list)
    activities: list[Activity] = field(default_factory=list)
    stats: Stats | None = None


def build_chart(rng: random.Random, today: date, days: int = _CHART_DAYS) -> list[ChartPoint]:
    """Random walk of daily prices ending today."""
    out: list[ChartPoint] = []
    price = _START_PRICE
    for i in range(days):
        d = today - timedelta(days=days - 1 - i)
        price = max(0.01, price * (1 + rng.uniform(-0.05, 0.06)))
        out.append(ChartPoint(date=d.strftime("%d/%m"), value=round(price, 4)))
    return out


def build_activities(rng: random.Random, now: datetime, count: int = 5) -> list[Activity]:
    out: list[Activity] = []
    for i in range(count):
        desc, typ = rng.choice(_ACTIVITY_TEMPLATES)
        amount = round(rng.uniform(5, 500), 2)
        when = now - timedelta(hours=rng.randint(1, 72) + 72 * i)
        out.append(
            Activity(
                id=i + 1,
                description=desc,
                amount=amount if typ == "gain" else -amount,
                type=typ,
                timestamp=when.strftime("%d/%m/%Y %H:%M"),
            )
        )
    return out


def build_stats(chart: list[ChartPoint], rng: random.Random) -> Stats:
    first = chart[0].value if chart else _START_PRICE
    last = chart[-1].value if chart else _START_PRICE
    change = round((last - first) / first * 100, 2) if first else 0.0
    return Stats(
        market_cap=f"R$ {rng.uniform(1.5, 9.5):.1f}M",
        holders=f"{rng.randint(8_000, 25_000):,}".replace(",", "."),
        transactions=f"{rng.randint(100_000, 900_000):,}".replace(",", "."),
        change=change,
    )


def build_mock_data(rng: random.Random | None = None, now: datetime | None = None) -> MockData:
    """Build a full MockData bundle. Deterministic for a seeded rng and fixed `now`."""
    r = rng or random.Random()
    n = now or datetime.now()
    chart = build_chart(r, n.date())
    return MockData(
        chart_data=chart,
        activities=build_activities(r, n),
        stats=build_stats(chart, r),
    )
