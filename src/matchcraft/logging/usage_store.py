"""SQLite-backed usage log storage."""

from __future__ import annotations

import sqlite3
from datetime import datetime
from pathlib import Path

from matchcraft.logging.models import UsageLog

COLUMNS = (
    "id", "timestamp", "command", "template", "target_industry",
    "experience_level", "industry_fit", "match_score", "ats_score",
    "elapsed_seconds", "total_input_tokens", "total_output_tokens",
    "estimated_cost_usd", "success", "error_kind",
)


class UsageStore:
    """Run history in a single SQLite file (WAL mode)."""

    def __init__(self, db_path: str | Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self.db_path))
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS usage_logs (
                    id TEXT PRIMARY KEY,
                    timestamp TEXT NOT NULL,
                    command TEXT NOT NULL,
                    template TEXT NOT NULL,
                    target_industry TEXT,
                    experience_level TEXT,
                    industry_fit TEXT,
                    match_score INTEGER,
                    ats_score INTEGER,
                    elapsed_seconds REAL NOT NULL DEFAULT 0.0,
                    total_input_tokens INTEGER NOT NULL DEFAULT 0,
                    total_output_tokens INTEGER NOT NULL DEFAULT 0,
                    estimated_cost_usd REAL NOT NULL DEFAULT 0.0,
                    success INTEGER NOT NULL DEFAULT 1,
                    error_kind TEXT
                )
            """)

    def save_log(self, log: UsageLog) -> None:
        row = log.model_dump()
        row["timestamp"] = log.timestamp.isoformat()
        row["success"] = 1 if log.success else 0
        placeholders = ", ".join("?" for _ in COLUMNS)
        with self._connect() as conn:
            conn.execute(
                f"INSERT OR REPLACE INTO usage_logs ({', '.join(COLUMNS)}) VALUES ({placeholders})",
                tuple(row[c] for c in COLUMNS),
            )

    def get_logs(self, command: str | None = None, limit: int = 50) -> list[UsageLog]:
        """Most recent logs first, optionally only one command."""
        with self._connect() as conn:
            if command is not None:
                rows = conn.execute(
                    "SELECT * FROM usage_logs WHERE command = ? ORDER BY timestamp DESC LIMIT ?",
                    (command, limit),
                ).fetchall()
            else:
                rows = conn.execute(
                    "SELECT * FROM usage_logs ORDER BY timestamp DESC LIMIT ?",
                    (limit,),
                ).fetchall()
        return [self._row_to_log(row) for row in rows]

    def get_monthly_stats(self, now: datetime | None = None) -> dict:
        """Aggregates for the calendar month containing ``now``."""
        now = now or datetime.now()
        month_start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        with self._connect() as conn:
            row = conn.execute(
                """SELECT
                       COUNT(*) AS total_runs,
                       SUM(total_input_tokens) AS total_input,
                       SUM(total_output_tokens) AS total_output,
                       SUM(estimated_cost_usd) AS total_cost,
                       AVG(match_score) AS avg_match,
                       AVG(ats_score) AS avg_ats,
                       SUM(CASE WHEN success = 1 THEN 1 ELSE 0 END) AS success_count
                   FROM usage_logs
                   WHERE timestamp >= ?""",
                (month_start.isoformat(),),
            ).fetchone()
        total = row["total_runs"] or 0
        return {
            "month": now.strftime("%Y-%m"),
            "total_runs": total,
            "total_input_tokens": row["total_input"] or 0,
            "total_output_tokens": row["total_output"] or 0,
            "total_cost_usd": row["total_cost"] or 0.0,
            "avg_match_score": round(row["avg_match"], 1) if row["avg_match"] is not None else None,
            "avg_ats_score": round(row["avg_ats"], 1) if row["avg_ats"] is not None else None,
            "success_rate": (row["success_count"] / total * 100) if total else 0.0,
        }

    def get_total_cost(self) -> float:
        with self._connect() as conn:
            row = conn.execute("SELECT SUM(estimated_cost_usd) FROM usage_logs").fetchone()
        return row[0] or 0.0

    @staticmethod
    def _row_to_log(row: sqlite3.Row) -> UsageLog:
        data = dict(row)
        data["timestamp"] = datetime.fromisoformat(data["timestamp"])
        data["success"] = bool(data["success"])
        return UsageLog(**data)
