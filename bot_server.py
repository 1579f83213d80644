"""
Fantasy Football League Bot
===========================
A chat webhook for an ESPN Fantasy Football league that answers:
- player NAME    free-agency search for a player
- score [WEEK]   the league scoreboard for a week (current week if omitted)
- sup            recent league activity (adds, drops, trades)

Chat integrations POST the message text to /api/command and post the
returned reply back to the channel.
"""

import logging
import os
from typing import Optional

from flask import Flask, jsonify, request

from ffbot import CommandRouter, FetchError, LeagueService, Settings, ValidationError, validate_week

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


class FantasyBot:
    """Flask wrapper around the shared LeagueService and command router."""

    def __init__(self, settings: Optional[Settings] = None, service: Optional[LeagueService] = None):
        self.app = Flask(__name__)
        self.settings = settings or Settings.from_env()
        self.service = service or LeagueService(self.settings)
        self.router = CommandRouter(self.service)

        self._setup_routes()

    # ------------------------------------------------------------------ #
    # Routes
    # ------------------------------------------------------------------ #
    def _setup_routes(self):
        @self.app.errorhandler(FetchError)
        def fetch_failed(exc):
            logger.warning("ESPN fetch failed: %s", exc)
            return jsonify({"error": "Unable to reach ESPN."}), 502

        @self.app.errorhandler(ValidationError)
        def invalid_request(exc):
            return jsonify({"error": str(exc)}), 400

        @self.app.route("/health")
        def health():
            return jsonify(
                {
                    "status": "ok",
                    "league_id": self.settings.league_id,
                    "season_id": self.settings.season_id,
                }
            )

        @self.app.route("/api/command", methods=["POST"])
        def api_command():
            payload = request.get_json(silent=True) or {}
            text = payload.get("text")
            if not text:
                return jsonify({"error": "Missing 'text' in request body."}), 400

            reply = self.router.handle(text, user=payload.get("user"))
            return jsonify({"reply": reply})

        @self.app.route("/api/players")
        def api_players():
            name = request.args.get("name", "").strip()
            if not name:
                raise ValidationError("Missing 'name' query parameter.")

            results = self.service.player_search(name, position=request.args.get("position"))
            return jsonify({"headers": list(results.headers), "players": results.as_dicts()})

        @self.app.route("/api/scoreboard")
        def api_scoreboard():
            week = validate_week(request.args.get("week"))
            results = self.service.scoreboard(week)
            return jsonify({"week": week, "headers": list(results.headers), "matchups": results.as_dicts()})

        @self.app.route("/api/activity")
        def api_activity():
            return jsonify({"activity": self.service.recent_activity()})

    def run(self, host="0.0.0.0", port: Optional[int] = None, debug: bool = False):
        if port is None:
            port = int(os.getenv("PORT", 5000))
        self.app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    bot = FantasyBot()
    bot.run()
