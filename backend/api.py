"""
Flask API for the Resume Analyzer
---------------------------------

Small web server the resume matcher UI talks to. The UI extracts text from
uploaded files and sends plain strings; this API runs the analyzer and
sends back the structured result.

Endpoints:
    POST /analyze                 { "resume": "...", "job_description": "..." }
    POST /skills/extract          { "text": "..." }
    POST /select_resume           { "job_description": "...", "resumes": [{ "id", "text" }] }
    POST /comparisons/summary     { "scores": [72, 45, ...] }
    GET  /health
"""

import os
import random
import socket
import sys

from dotenv import load_dotenv

# Load .env early so SKILL_TERMS_FILE is set before ml.skills is imported
load_dotenv()

# Flask basics for building APIs
from flask import Flask, jsonify, request
from flask_cors import CORS  # lets the browser UI call this API without CORS errors
from werkzeug.exceptions import HTTPException

from matcher.analyzer import ResumeAnalyzer
from ml.skills import ACTIVE_PATTERNS, extract_skills_by_category

from .matcher.resume_selector import select_best_resume, summarize_comparisons

DEFAULT_MAX_TEXT_CHARS = 200000


def read_max_text_chars() -> int:
    """Per-field size limit from MAX_TEXT_CHARS; the analyzer itself accepts anything."""
    env_limit = os.getenv("MAX_TEXT_CHARS")
    if env_limit:
        try:
            return int(env_limit)
        except ValueError:
            print(f"[warn] Ignoring invalid MAX_TEXT_CHARS={env_limit!r}", file=sys.stderr)
    return DEFAULT_MAX_TEXT_CHARS


MAX_TEXT_CHARS = read_max_text_chars()

# === Set up Flask app ===
app = Flask(__name__)
CORS(app)  # allow cross-origin requests from the UI

# --- Global error handlers (always return JSON) ---


@app.errorhandler(HTTPException)
def handle_http_exception(e: HTTPException):
    """
    Convert all Werkzeug/Flask HTTPExceptions (abort(404), etc.)
    into a consistent JSON shape so the UI can inspect error.code.
    """
    response = jsonify(
        {
            "error": e.description or str(e),
            "code": e.code,
            "type": e.name,
        }
    )
    return response, e.code


@app.errorhandler(Exception)
def handle_unexpected_exception(e: Exception):
    """
    Catch-all for any unhandled exception and return JSON 500.
    This prevents HTML error pages from confusing the UI.
    """
    # Log full traceback to the server console for debugging
    import traceback

    traceback.print_exc()

    response = jsonify(
        {
            "error": "Internal server error",
            "code": 500,
            "details": str(e),
        }
    )
    return response, 500


# === Instantiate analyzer once ===
analyzer = ResumeAnalyzer()
print(f"[api] analyzer ready with {len(ACTIVE_PATTERNS)} skill categories")


def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text_field_error(data: dict, field: str):
    """Return (json, status) if data[field] is not a usable string, else None."""
    value = data.get(field)
    if not isinstance(value, str):
        return jsonify({"error": f"{field} (text) is required"}), 400
    if len(value) > MAX_TEXT_CHARS:
        return jsonify({"error": f"{field} is longer than {MAX_TEXT_CHARS} characters"}), 413
    return None


@app.route("/analyze", methods=["POST", "OPTIONS"])
def analyze():
    """
    Compare resume against job description.

    Input JSON:
        { "resume": "...", "job_description": "..." }

    Output JSON:
        {
          "match_percentage": 51,
          "matched_skills": ["typescript", "react", "aws"],
          "missing_skills": [],
          "top_keywords": [{"word": "react", "score": 0.2}, ...],
          "suggestions": ["Good match! ...", ...],
          "score_tier": "moderate"
        }
    """
    if request.method == "OPTIONS":
        return ("", 204)
    data = _json_body()

    # Validate input (blank strings are fine, they just score 0)
    for field in ("resume", "job_description"):
        err = _text_field_error(data, field)
        if err:
            return err

    result = analyzer.analyze(data["resume"], data["job_description"])
    return jsonify(result.to_dict())


@app.post("/skills/extract")
def skills_extract():
    """
    POST { "text": "<resume plain text>" } -> { "skills": [...], "by_category": {...} }
    Returns 200 even for empty text.
    """
    data = _json_body()
    if data.get("text") is None:
        data["text"] = ""
    err = _text_field_error(data, "text")
    if err:
        return err
    text = data["text"]

    by_category = extract_skills_by_category(text)
    skills = [s for group in by_category.values() for s in group]
    return jsonify({"skills": skills, "by_category": by_category}), 200


@app.route("/select_resume", methods=["POST", "OPTIONS"])
def select_resume_api():
    if request.method == "OPTIONS":
        return ("", 204)
    data = _json_body()

    err = _text_field_error(data, "job_description")
    if err:
        return err

    resumes = data.get("resumes")
    if not isinstance(resumes, list) or not all(
        isinstance(r, dict) and "id" in r and isinstance(r.get("text", ""), str) for r in resumes
    ):
        return jsonify({"error": "resumes must be a list of {id, text}"}), 400
    if any(len(r.get("text", "")) > MAX_TEXT_CHARS for r in resumes):
        return jsonify({"error": f"resume text is longer than {MAX_TEXT_CHARS} characters"}), 413

    best, ranking = select_best_resume(data["job_description"], resumes)
    return jsonify({"best": best, "ranking": ranking})


@app.post("/comparisons/summary")
def comparisons_summary():
    """
    POST { "scores": [72, 45, 90] }
    -> { "count": 3, "average_score": 69, "top_score": 90, "strong_matches": 2 }
    The UI keeps its own comparison history and sends the scores here.
    """
    data = _json_body()
    scores = data.get("scores")
    if not isinstance(scores, list) or not all(
        isinstance(s, (int, float)) and not isinstance(s, bool) for s in scores
    ):
        return jsonify({"error": "scores must be a list of numbers"}), 400
    return jsonify(summarize_comparisons(scores))


# === Health check endpoint ===
@app.route("/health", methods=["GET"])
def health():
    """
    Simple check to see if the server is running.
    http://127.0.0.1:5000/health -> { "ok": true }
    """
    return jsonify({"ok": True})


def choose_dev_port():
    """
    Pick a port for local dev.

    Can override with ANALYZER_PORT to keep it fixed.
    """
    # 1) Allow an explicit override.
    env_port = os.getenv("ANALYZER_PORT")
    if env_port:
        try:
            return int(env_port)
        except ValueError:
            print(f"[warn] Ignoring invalid ANALYZER_PORT={env_port!r}", file=sys.stderr)

    # 2) Choose a free one from the pool.
    candidates = [5000, 5001, 5002, 5003, 5004]
    random.shuffle(candidates)
    for port in candidates:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            try:
                sock.bind(("127.0.0.1", port))
            except OSError:
                continue
            # successfully reserved; OS frees it when we close
            return port

    # 3) Fallback.
    return 5000


# === Run the server ===
if __name__ == "__main__":
    port = choose_dev_port()
    print(f"*** Resume Analyzer backend listening on http://127.0.0.1:{port} ***")
    app.run(debug=True, port=port)
