import logging
import time
import uuid
from flask import Flask, render_template, request, redirect, url_for, session

from algoviz import (
    SEARCHING_ALGORITHMS,
    SORTING_ALGORITHMS,
    Playback,
    UnknownAlgorithmError,
    generate_random_array,
    get_searching_algorithm,
    get_sorting_algorithm,
    parse_values,
    pick_target,
)

app = Flask(__name__)
app.config.from_mapping(
    SECRET_KEY="replace-with-a-random-secret",  # change for production
    MIN_SIZE=5,
    MAX_SIZE=100,
    DEFAULT_SIZE=30,
    MIN_SPEED=0.01,   # seconds per step
    MAX_SPEED=1.00,
    DEFAULT_SPEED=0.25,
    VALUE_MIN=5,
    VALUE_MAX=100,
)
# FLASK_SECRET_KEY, FLASK_MAX_SIZE, ... override the defaults above
app.config.from_prefixed_env()

FAMILIES = {
    "sorting": SORTING_ALGORITHMS,
    "searching": SEARCHING_ALGORITHMS,
}

# In-memory store (OK for local demo)
RUNS = {}

# ---------------- Form parsing ----------------
def _int_field(name, default):
    try:
        return int(request.form[name])
    except (KeyError, ValueError):
        return default

def _float_field(name, default):
    try:
        return float(request.form[name])
    except (KeyError, ValueError):
        return default

def _resolve_algorithm(key):
    """Return (family, algorithm) for a key; keys are unique across families."""
    for family, lookup in (("sorting", get_sorting_algorithm),
                           ("searching", get_searching_algorithm)):
        try:
            return family, lookup(key)
        except UnknownAlgorithmError:
            continue
    fallback = next(iter(SORTING_ALGORITHMS.values()))
    app.logger.warning("Unknown algorithm %r, using %s", key, fallback.key)
    return "sorting", fallback

def _input_values(size):
    text = request.form.get("values", "").strip()
    if text:
        try:
            return parse_values(text)[:app.config["MAX_SIZE"]]
        except ValueError:
            app.logger.warning("Could not parse values %r, generating random input", text)
    return generate_random_array(size, app.config["VALUE_MIN"], app.config["VALUE_MAX"])

# ---------------- Routes ----------------
@app.route("/", methods=["GET"])
def index():
    return render_template("index.html", families=FAMILIES)

@app.route("/start", methods=["POST"])
def start():
    cfg = app.config
    family, algo = _resolve_algorithm(request.form.get("algorithm", ""))

    size = _int_field("size", cfg["DEFAULT_SIZE"])
    size = max(cfg["MIN_SIZE"], min(size, cfg["MAX_SIZE"]))

    # speed from form is in SECONDS
    speed = _float_field("speed", cfg["DEFAULT_SPEED"])
    speed = max(cfg["MIN_SPEED"], min(speed, cfg["MAX_SPEED"]))

    autoplay = request.form.get("autoplay") == "on"

    values = _input_values(size)
    target = None
    started = time.perf_counter()
    if family == "sorting":
        steps = algo.record(values)
    else:
        target = _int_field("target", None)
        if target is None:
            target = pick_target(values, cfg["VALUE_MIN"], cfg["VALUE_MAX"])
        steps = algo.record(values, target)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

    # a new recording supersedes this session's previous one
    RUNS.pop(session.get("run_id"), None)
    run_id = str(uuid.uuid4())
    RUNS[run_id] = {
        "family": family,
        "algo": algo.key,
        "values": values,
        "target": target,
        "steps": steps,
        "playback": Playback(total=len(steps), autoplay=autoplay, speed=speed),
        "elapsed_ms": elapsed_ms,
    }
    session["run_id"] = run_id
    app.logger.info("Run %s: %s over %d values, %d steps in %.2f ms",
                    run_id, algo.key, len(values), len(steps), elapsed_ms)
    return redirect(url_for("view"))

def _current_run():
    run_id = session.get("run_id")
    if not run_id or run_id not in RUNS:
        return None
    return RUNS[run_id]

@app.route("/view", methods=["GET"])
def view():
    run = _current_run()
    if run is None:
        return redirect(url_for("index"))

    playback = run["playback"]
    algorithms = FAMILIES[run["family"]]
    return render_template(
        "view.html",
        algo=algorithms[run["algo"]],
        family=run["family"],
        idx=playback.index,
        total=playback.total,
        frame=run["steps"][playback.index],
        target=run["target"],
        max_value=max((abs(v) for v in run["values"]), default=0) or 1,
        autoplay=playback.autoplay,
        speed=playback.speed,
        elapsed_ms=run["elapsed_ms"],
    )

@app.route("/advance", methods=["POST", "GET"])
def advance():
    # GET dir=tick is used by meta refresh; POST by buttons (Prev/Next)
    run = _current_run()
    if run is None:
        return redirect(url_for("index"))
    run["playback"].apply(request.values.get("dir", "next"))
    return redirect(url_for("view"))

@app.route("/reset", methods=["POST"])
def reset():
    run_id = session.get("run_id")
    if run_id in RUNS:
        del RUNS[run_id]
    session.pop("run_id", None)
    return redirect(url_for("index"))

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    # Host locally; debug=True for development
    app.run(debug=True)
