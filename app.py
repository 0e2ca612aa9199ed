from __future__ import annotations

import os
import threading
import uuid
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from concentration_core.board import Board
from concentration_core.deal import STANDARD_SIZE, check_board_size, deal_board
from concentration_core.engine import OVER, RESOLVING, GameEngine
from concentration_core.errors import PickError
from concentration_core.render import render_rows

app = Flask(__name__)

# Games live only in this process; ids are handed back to the one browser that created them.
GAMES: Dict[str, GameEngine] = {}
# Oldest games are dropped once the table is full; finished games are dropped right away.
MAX_GAMES = 1000
# Guards GAMES and every pick -> resolve sequence.
_LOCK = threading.Lock()


def _grid_to_json(board: Board) -> List[List[str]]:
    return [row.split(' ') for row in render_rows(board)]


def _state_to_json(engine: GameEngine) -> Dict[str, Any]:
    return {
        "size": int(engine.board.size),
        "grid": _grid_to_json(engine.board),
        "phase": engine.phase,
        "guessCount": int(engine.guess_count),
        "maxGuesses": int(engine.max_guesses),
        "remainingPairs": int(engine.board.remaining_pairs()),
        "outcome": engine.outcome(),
        "message": engine.end_message(),
    }


def _json_body() -> Optional[Dict[str, Any]]:
    """The request's JSON object; {} for a missing body, None for any other JSON value."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _bad_body() -> Any:
    return jsonify({"ok": False, "error": "request body must be a JSON object"}), 400


def _board_size(value: Any) -> int:
    # numeric strings such as "4" are accepted; 4.9 or True are not
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    return check_board_size(value)


def _lookup(body: Dict[str, Any]) -> Optional[GameEngine]:
    return GAMES.get(str(body.get("id", "")))


def _register(engine: GameEngine) -> str:
    game_id = uuid.uuid4().hex
    with _LOCK:
        while len(GAMES) >= MAX_GAMES:
            GAMES.pop(next(iter(GAMES)))
        GAMES[game_id] = engine
    return game_id


@app.post("/api/new")
def api_new() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    seed = body.get("seed", None)
    try:
        size = _board_size(body.get("size", STANDARD_SIZE))
        board = deal_board(size, seed=seed)
    except (TypeError, ValueError) as e:
        # BoardSizeError is a ValueError
        return jsonify({"ok": False, "error": str(e)}), 400
    engine = GameEngine(board)
    game_id = _register(engine)
    return jsonify({"ok": True, "id": game_id, "state": _state_to_json(engine)})


@app.post("/api/state")
def api_state() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    with _LOCK:
        engine = _lookup(body)
        if engine is None:
            return jsonify({"ok": False, "error": "unknown game"}), 404
        return jsonify({"ok": True, "state": _state_to_json(engine)})


@app.post("/api/pick")
def api_pick() -> Any:
    body = _json_body()
    if body is None:
        return _bad_body()
    with _LOCK:
        engine = _lookup(body)
        if engine is None:
            return jsonify({"ok": False, "error": "unknown game"}), 404
        try:
            engine.pick(str(body.get("pick", "")))
        except PickError as e:
            return jsonify({"ok": False, "kind": e.kind, "error": e.message}), 400
        if engine.phase != RESOLVING:
            return jsonify({"ok": True, "state": _state_to_json(engine)})
        revealed = _grid_to_json(engine.board)
        result = engine.resolve()
        if engine.phase == OVER:
            GAMES.pop(str(body.get("id", "")), None)
        return jsonify({
            "ok": True,
            "revealed": revealed,
            "result": {
                "first": list(result.first),
                "second": list(result.second),
                "symbols": list(result.symbols),
                "matched": result.matched,
                "guessCount": result.guess_count,
            },
            "state": _state_to_json(engine),
        })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=debug)
