# app.py
# Provides a minimal Flask-based REST API for the class schedule planner.

import logging

from flask import Flask, request, jsonify, send_from_directory

from catalog import ScheduleOptions, load_options
from schedule_finder import find_schedules, find_unresolvable_pairs
from schedule_printer import schedule_rows, schedule_to_json

app = Flask(__name__, static_folder="static")
logger = logging.getLogger(__name__)

# Class catalog, loaded at startup.
SCHEDULE_OPTIONS = ScheduleOptions(periods=[], classes=[])


@app.get("/api/classes")
def api_classes():
    # Returns the loaded class catalog.
    return jsonify(SCHEDULE_OPTIONS.to_dict())


@app.post("/api/schedules")
def api_schedules():
    # Generates schedules from a JSON payload of chosen classes and, optionally, section indices.
    body = request.get_json(silent=True) or {}
    chosen = body.get("chosenClasses", [])
    if not (isinstance(chosen, list) and chosen):
        return jsonify({"error": "chosenClasses must be a non-empty list"}), 400
    if not all(valid_choice(c) for c in chosen):
        return jsonify({"error": "each chosen class needs a string name and optional list of section indices"}), 400

    limit = body.get("limit")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
        return jsonify({"error": "limit must be a positive integer"}), 400

    options = SCHEDULE_OPTIONS.select(chosen)
    schedules = find_schedules(options, limit=limit)
    if schedules:
        return jsonify([
            {"table": schedule_rows(s, options), "slots": schedule_to_json(s)}
            for s in schedules
        ])

    # If no schedules are possible, identify pairs of classes that are inherently in conflict.
    return jsonify({
        "error": "No valid schedules found",
        "unresolvablePairs": find_unresolvable_pairs(options)
    })


def valid_choice(entry):
    # A chosen class is {"name": str} with an optional list of integer section indices.
    if not (isinstance(entry, dict) and isinstance(entry.get("name"), str)):
        return False
    sections = entry.get("sections")
    if sections is None:
        return True
    return isinstance(sections, list) and all(
        isinstance(i, int) and not isinstance(i, bool) for i in sections
    )


@app.get("/")
def root():
    # Serves the main index.html, the entry point for the SPA.
    return send_from_directory(app.static_folder, "index.html")


if __name__ == "__main__":
    # Load the catalog into memory and start the development server.
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    SCHEDULE_OPTIONS = load_options()
    logger.info("Loaded %d classes", len(SCHEDULE_OPTIONS.classes))
    app.run(debug=True)
