"""
League Data Preview
===================
A small Flask server for checking the generated league data locally:
- Rosters and schedules as read from static/data
- The sheet mappings the updater resolves against
- Optional background refresh of both documents
"""

import json
import logging
import os
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from flask import Flask, jsonify, render_template_string

from league_sync import LeagueSyncError, LeagueUpdater, settings

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


PREVIEW_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>League Data Preview</title>
    <style>
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', system-ui, sans-serif;
            background: #f5f5f5;
            color: #333;
            margin: 0;
            padding: 20px;
        }
        .container {
            max-width: 1000px;
            margin: 0 auto;
        }
        .card {
            background: white;
            border-radius: 8px;
            box-shadow: 0 2px 4px rgba(0, 0, 0, 0.1);
            padding: 16px 20px;
            margin-bottom: 20px;
        }
        .last-update {
            font-size: 0.9em;
            color: #888;
        }
        .error {
            color: #dc3545;
            background: #f8d7da;
            border: 1px solid #f5c6cb;
            border-radius: 4px;
            padding: 8px 12px;
        }
        table {
            width: 100%;
            border-collapse: collapse;
        }
        th, td {
            padding: 6px 10px;
            text-align: left;
            border-bottom: 1px solid #ddd;
        }
    </style>
</head>
<body>
    <div class="container">
        <h1>League Data Preview</h1>
        {% if last_refresh %}
        <p class="last-update">Last refresh: {{ last_refresh.strftime('%Y-%m-%d %H:%M:%S') }}</p>
        {% endif %}
        {% if refresh_error %}
        <p class="error">{{ refresh_error }}</p>
        {% endif %}

        {% for team in teams %}
        <div class="card">
            <h2>{{ team }}</h2>
            {% set players = rosters.get('teams', {}).get(team, {}).get('players', []) %}
            {% set games = schedule.get('teams', {}).get(team, {}).get('schedule', []) %}
            <h3>Roster ({{ players|length }})</h3>
            {% if players %}
            <table>
                <thead><tr><th>#</th><th>Name</th><th>Goals</th></tr></thead>
                <tbody>
                {% for player in players %}
                    <tr><td>{{ player.number }}</td><td>{{ player.name }}</td><td>{{ player.goals }}</td></tr>
                {% endfor %}
                </tbody>
            </table>
            {% else %}
            <p>No roster data.</p>
            {% endif %}
            <h3>Schedule ({{ games|length }})</h3>
            {% if games %}
            <table>
                <thead><tr><th>Week</th><th>Date</th><th>Opponent</th></tr></thead>
                <tbody>
                {% for game in games %}
                    <tr><td>{{ game.week }}</td><td>{{ game.date }}</td><td>{{ game.opponent }}</td></tr>
                {% endfor %}
                </tbody>
            </table>
            {% else %}
            <p>No schedule data.</p>
            {% endif %}
        </div>
        {% endfor %}
    </div>
</body>
</html>
"""


def load_document(path: Path) -> Dict:
    """Read one generated document; a missing file reads as empty."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


class LeagueDataServer:
    """Flask wrapper around the generated documents and the shared updater."""

    def __init__(self, updater: Optional[LeagueUpdater] = None, refresh_interval: int = 0):
        self.app = Flask(__name__)
        self.updater = updater or LeagueUpdater.from_settings()
        self.refresh_interval = refresh_interval
        self.last_refresh: Optional[datetime] = None
        self.refresh_error: Optional[str] = None
        self._refresh_lock = threading.Lock()

        self._setup_routes()
        if refresh_interval > 0:
            self._start_refresh_loop()

    @property
    def rosters_path(self) -> Path:
        return self.updater.output_dir / settings.ROSTERS_FILENAME

    @property
    def schedule_path(self) -> Path:
        return self.updater.output_dir / settings.SCHEDULE_FILENAME

    # ------------------------------------------------------------------ #
    # Refresh
    # ------------------------------------------------------------------ #
    def refresh(self) -> bool:
        """Rebuild both documents; returns False when the run was aborted."""
        with self._refresh_lock:
            try:
                self.updater.update_rosters()
                self.updater.update_schedule()
            except (LeagueSyncError, OSError) as exc:
                logger.warning("League data refresh failed: %s", exc)
                self.refresh_error = f"Refresh failed: {exc}"
                return False

            self.last_refresh = datetime.now()
            self.refresh_error = None
            return True

    def _start_refresh_loop(self):
        thread = threading.Thread(target=self._refresh_loop, daemon=True)
        thread.start()

    def _refresh_loop(self):
        consecutive_failures = 0

        while True:
            try:
                ok = self.refresh()
            except Exception as exc:
                logger.warning("League data refresh failed: %s", exc)
                self.refresh_error = f"Refresh failed: {exc}"
                ok = False

            if ok:
                consecutive_failures = 0
            else:
                consecutive_failures += 1
            time.sleep(self._determine_sleep_interval(consecutive_failures))

    def _determine_sleep_interval(self, failures: int) -> int:
        if failures > 0:
            return min(600, 60 * (2 ** min(failures, 4)))
        return self.refresh_interval

    # ------------------------------------------------------------------ #
    # Routes
    # ------------------------------------------------------------------ #
    def _setup_routes(self):
        # The preview must always show the files as they are on disk
        @self.app.after_request
        def add_header(response):
            response.cache_control.no_cache = True
            response.cache_control.must_revalidate = True
            response.cache_control.no_store = True
            return response

        @self.app.route("/")
        def preview():
            return render_template_string(
                PREVIEW_TEMPLATE,
                teams=self.updater.teams,
                rosters=load_document(self.rosters_path),
                schedule=load_document(self.schedule_path),
                last_refresh=self.last_refresh,
                refresh_error=self.refresh_error,
            )

        @self.app.route("/api/rosters")
        def api_rosters():
            return jsonify(load_document(self.rosters_path))

        @self.app.route("/api/schedule")
        def api_schedule():
            return jsonify(load_document(self.schedule_path))

        @self.app.route("/api/sheets")
        def api_sheets():
            try:
                sheets = self.updater.locator.available_sheets()
            except LeagueSyncError as exc:
                return jsonify({"sheets": [], "error": str(exc)}), 502
            return jsonify({"sheets": sheets})

        @self.app.route("/api/refresh", methods=["POST"])
        def api_refresh():
            ok = self.refresh()
            return (
                jsonify(
                    {
                        "ok": ok,
                        "last_refresh": self.last_refresh.isoformat() if self.last_refresh else None,
                        "error": self.refresh_error,
                    }
                ),
                200 if ok else 502,
            )

    def run(self, host="0.0.0.0", port: Optional[int] = None, debug: bool = False):
        if port is None:
            port = int(os.getenv("PORT", 5000))
        self.app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    server = LeagueDataServer(refresh_interval=settings.REFRESH_INTERVAL)
    server.run(debug=True)
