"""
Sokobot — Flask web server.

Provides an async job-based API for solving Sokoban puzzles.

Encapsulation: this module only calls parse_level(), search(), and reads
SearchResult attributes.  Option names are checked against the HEURISTICS
and DETECTORS registries.

Jobs live in an in-memory dict that is never pruned, and a job that times
out is only marked as an error: its solver thread keeps running until the
search ends.  Restart the server to reclaim either.
"""

import logging
import threading
import uuid

from flask import Flask, jsonify, request

from board import CRATE, Board
from config import Config
from deadlock import DETECTORS
from heuristic import HEURISTICS
from level import parse_level
from puzzles import PUZZLES, get_puzzle_names
from solver import search

app = Flask(__name__)
app.config.from_object(Config)

logging.basicConfig(
    level=app.config["LOG_LEVEL"],
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

# In-memory job store: job_id -> job dict
jobs: dict[str, dict] = {}


# ---------------------------------------------------------------------------
# API endpoints
# ---------------------------------------------------------------------------

@app.route("/api/levels", methods=["GET"])
def get_levels():
    """Return the built-in puzzle catalog."""
    levels = []
    for name in get_puzzle_names():
        text = PUZZLES[name]
        puzzle = parse_level(text)
        levels.append({
            "name": name,
            "text": text,
            "crates": sum(row.count(CRATE) for row in puzzle.items),
        })
    return jsonify(levels)


@app.route("/api/solve", methods=["POST"])
def start_solve():
    """Validate a level synchronously, then solve in a background thread."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify(status="error",
                       message="Request body must be a JSON object."), 400

    for field in ("level", "name", "heuristic", "deadlock"):
        if field in data and not isinstance(data[field], str):
            return jsonify(status="error",
                           message=f"Field '{field}' must be a string."), 400

    name = data.get("name")
    if name is not None:
        if name not in PUZZLES:
            return jsonify(status="error",
                           message=f"Unknown puzzle '{name}'."), 400
        level_text = PUZZLES[name]
    else:
        level_text = data.get("level", "").strip("\n")
        if not level_text.strip():
            return jsonify(status="error",
                           message="Missing 'level' or 'name' field."), 400

    heuristic = data.get("heuristic", app.config["HEURISTIC"])
    if heuristic not in HEURISTICS:
        return jsonify(status="error",
                       message=f"Unknown heuristic '{heuristic}'."), 400
    deadlock = data.get("deadlock", app.config["DEADLOCK"])
    if deadlock not in DETECTORS:
        return jsonify(status="error",
                       message=f"Unknown deadlock detector '{deadlock}'."), 400

    # Validate synchronously so bad levels fail fast
    try:
        puzzle = parse_level(level_text)
    except ValueError as e:
        return jsonify(status="error", message=str(e)), 400

    job_id = uuid.uuid4().hex
    job: dict = {
        "status": "searching",
        "states_explored": 0,
        "moves": None,
        "length": None,
    }
    jobs[job_id] = job

    timeout = app.config["SOLVE_TIMEOUT"]
    max_states = app.config["MAX_STATES"] or None
    progress_every = app.config["PROGRESS_EVERY"]
    board = Board.from_map(puzzle.width, puzzle.height, puzzle.static_map)

    def run_solver():
        result_holder = [None]
        error_holder = [None]

        def on_progress(n):
            job["states_explored"] = n

        def do_solve():
            try:
                result_holder[0] = search(
                    board, puzzle.items,
                    heuristic=heuristic, deadlock=deadlock,
                    max_states=max_states,
                    progress_callback=on_progress,
                    progress_every=progress_every,
                )
            except Exception as e:
                app.logger.exception("job %s failed", job_id)
                error_holder[0] = str(e)

        thread = threading.Thread(target=do_solve, daemon=True)
        thread.start()
        thread.join(timeout=timeout)

        if thread.is_alive():
            job["message"] = "Solver timed out."
            job["status"] = "error"
        elif error_holder[0]:
            job["message"] = error_holder[0]
            job["status"] = "error"
        else:
            result = result_holder[0]
            job["states_explored"] = result.states_explored
            if result.solved:
                job["moves"] = result.moves
                job["length"] = len(result.moves)
                job["status"] = "solved"
            elif result.exhausted:
                job["status"] = "no_solution"
            else:
                job["message"] = "State limit reached."
                job["status"] = "error"
        app.logger.info("job %s finished: %s", job_id, job["status"])

    threading.Thread(target=run_solver, daemon=True).start()
    app.logger.info("job %s started (%dx%d, heuristic=%s, deadlock=%s)",
                    job_id, puzzle.width, puzzle.height, heuristic, deadlock)

    return jsonify(status="ok", job_id=job_id)


@app.route("/api/solve/<job_id>", methods=["GET"])
def poll_solve(job_id):
    """Poll for the result of a solve job."""
    job = jobs.get(job_id)
    if job is None:
        return jsonify(status="error", message="Job not found."), 404
    return jsonify(job)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    app.run(debug=True, use_reloader=False, port=5000)
