import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from boggle_paths.metrics import StageTimer
from boggle_paths.score import rank_words, total_score
from boggle_paths.settings import EDITABLE_FIELDS, get_editable_settings, settings, update_settings
from boggle_paths.solver import InvalidGrid, search, validate_grid
from boggle_paths.trie import Trie, load_trie
from boggle_paths.verify import check_result

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("boggle")

# Populated at startup
_trie: Trie | None = None


class SolveRequest(BaseModel):
    board: list[str]
    words: list[str] | None = None


def _load_dictionary():
    global _trie
    path = settings.DICTIONARY_PATH
    if not path.exists():
        logger.warning("Dictionary %s not found; /solve needs a word list per request", path)
        _trie = None
        return
    logger.info("Loading dictionary from %s (min_length=%d)", path, settings.MIN_WORD_LENGTH)
    _trie = load_trie(str(path), settings.MIN_WORD_LENGTH)


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(application: FastAPI):
        _load_dictionary()
        yield

    application = FastAPI(title="Boggle Paths", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "trie_loaded": _trie is not None,
            "word_count": len(_trie) if _trie is not None else 0,
        }

    @application.post("/solve")
    def solve(req: SolveRequest):
        board = [row.lower() for row in req.board]
        try:
            rows, cols = validate_grid(board)
        except InvalidGrid as e:
            raise HTTPException(400, f"Invalid board: {e}")
        if rows * cols > settings.MAX_GRID_CELLS:
            raise HTTPException(413, f"Board too large (max {settings.MAX_GRID_CELLS} cells)")

        timer = StageTimer()

        if req.words is not None:
            with timer.stage("build_trie"):
                trie = Trie.build(w.lower() for w in req.words)
        elif _trie is not None:
            trie = _trie
        else:
            raise HTTPException(503, "No dictionary loaded and no words supplied")

        logger.info("Board %dx%d: %s", rows, cols, " / ".join(board))

        with timer.stage("search"):
            found = search(board, trie)

        if settings.DEBUG:
            problems = check_result(found, board, trie)
            for problem in problems:
                logger.error("Result check failed: %s", problem)

        ranked = rank_words(found)
        if settings.MAX_RESULTS > 0:
            ranked = ranked[:settings.MAX_RESULTS]
        logger.info("Found %d words (returning %d)", len(found), len(ranked))

        return JSONResponse({
            "board": board,
            "words": {w: found[w] for w in ranked},
            "word_count": len(found),
            "score": total_score(found),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(body: dict):
        old_min_length = settings.MIN_WORD_LENGTH
        errors = update_settings(settings, **body)
        if settings.MIN_WORD_LENGTH != old_min_length:
            _load_dictionary()
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


def main():
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=settings.PORT)


app = create_app()
