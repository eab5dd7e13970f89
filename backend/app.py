import logging

from flask import Flask, jsonify, request, Response
from flask_cors import CORS

import config
from data_access.score_store import SqliteScoreStore
from services.game_service import GameService

app = Flask(__name__)
logging.basicConfig(level=config.LOG_LEVEL)

# Enable CORS for API routes so a browser client on another origin can call Flask
CORS(app, resources={r"/api/*": {"origins": config.get_allowed_origins()}})

_game_service = None


def get_game_service() -> GameService:
    """Return the process-wide game, creating it on first use."""
    global _game_service
    if _game_service is None:
        _game_service = GameService(score_store=SqliteScoreStore())
    return _game_service


def set_game_service(service) -> None:
    """Replace the hosted game (tests inject one driven by a ManualScheduler)."""
    global _game_service
    if _game_service is not None:
        _game_service.shutdown()
    _game_service = service


def _json_body():
    """Parsed JSON object body, {} when absent, None when it is not an object."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _size_from_body(body):
    width = body.get("width")
    height = body.get("height")
    if width is None or height is None:
        return None
    return int(width), int(height)


@app.route("/api/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@app.route("/api/game/state", methods=["GET"])
def get_game_state():
    """
    Current session snapshot plus which screen the client should show.
    """
    try:
        return jsonify(get_game_service().snapshot())
    except Exception as error:
        logging.error(f"Error fetching game state: {error}")
        return jsonify({"error": "Failed to load game state"}), 500


@app.route("/api/game/start", methods=["POST"])
def start_game():
    """
    Start or restart a session.

    Body (optional):
    - width, height: the drawing area the client measured, in pixels
    """
    try:
        body = _json_body()
        if body is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400
        size = _size_from_body(body)
        service = get_game_service()
        state = service.start(*size) if size else service.start()
        return jsonify(state)
    except (TypeError, ValueError) as error:
        return jsonify({"error": f"Invalid board size: {error}"}), 400
    except Exception as error:
        logging.error(f"Error starting game: {error}")
        return jsonify({"error": "Failed to start game"}), 500


@app.route("/api/game/direction", methods=["POST"])
def change_direction():
    """
    Forward one input event.

    Body, one of:
    - direction: "up" | "down" | "left" | "right"
    - key: key code (37-40) or key name ("ArrowUp", "w", ...)
    - dx, dy: swipe displacement in screen pixels
    """
    try:
        body = _json_body()
        if body is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400
        state = get_game_service().steer(
            direction=body.get("direction"),
            key=body.get("key"),
            dx=body.get("dx"),
            dy=body.get("dy"),
        )
        return jsonify(state)
    except (TypeError, ValueError) as error:
        return jsonify({"error": str(error)}), 400
    except Exception as error:
        logging.error(f"Error changing direction: {error}")
        return jsonify({"error": "Failed to change direction"}), 500


@app.route("/api/game/resize", methods=["POST"])
def resize_board():
    try:
        body = _json_body()
        if body is None:
            return jsonify({"error": "Request body must be a JSON object"}), 400
        size = _size_from_body(body)
        if size is None:
            return jsonify({"error": "width and height are required"}), 400
        return jsonify(get_game_service().resize(*size))
    except (TypeError, ValueError) as error:
        return jsonify({"error": f"Invalid board size: {error}"}), 400
    except Exception as error:
        logging.error(f"Error resizing board: {error}")
        return jsonify({"error": "Failed to resize board"}), 500


@app.route("/api/game/frame.png", methods=["GET"])
def get_frame():
    try:
        return Response(get_game_service().frame_png(), mimetype="image/png")
    except Exception as error:
        logging.error(f"Error rendering frame: {error}")
        return jsonify({"error": "Failed to render frame"}), 500


@app.route("/api/high-score", methods=["GET"])
def get_high_score():
    try:
        return jsonify({"high_score": get_game_service().engine.high_score})
    except Exception as error:
        logging.error(f"Error fetching high score: {error}")
        return jsonify({"error": "Failed to load high score"}), 500


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=config.PORT, threaded=True)
