from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..container import Container
from .states import all_states, all_states_with_national


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"success": False, "message": "Authentication required"}), 401
            return view(*args, **kwargs)

        return wrapper

    @app.route("/api/holidays/states", methods=["GET"], endpoint="holiday_states")
    @login_required
    def holiday_states():
        # ?national=1 adds the nation-wide "ALL" option used when filtering holidays
        national = request.args.get("national", "0") in {"1", "true"}
        states = all_states_with_national() if national else all_states()
        return jsonify({
            "success": True,
            "states": [{"value": s.value, "label": s.label} for s in states],
        }), 200
