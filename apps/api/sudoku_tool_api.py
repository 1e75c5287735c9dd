# sudoku_tool_api.py
# FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from sudoku_search.grid import InvariantViolation
from sudoku_search.sudoku_tools import compute_candidates_tool, heuristics_tool, sanity_check, solve_tool

app = FastAPI(title="Sudoku Search API")


class GridModel(BaseModel):
    grid: List[List[int]]


class SanityRequest(BaseModel):
    original: List[List[int]]
    current: List[List[int]]


class SolveRequest(BaseModel):
    grid: Optional[List[List[int]]] = None
    triples: Optional[List[List[int]]] = None
    ranker: str = "full"
    value_order: str = "ascending"
    max_steps: Optional[int] = Field(default=None, ge=0)
    precheck: bool = False


def _bad_request(exc: Exception):
    return HTTPException(status_code=422, detail=str(exc))


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    try:
        return sanity_check(payload.original, payload.current)
    except InvariantViolation as exc:
        raise _bad_request(exc)


@app.post("/candidates")
def api_cands(payload: GridModel):
    try:
        return compute_candidates_tool(payload.grid)
    except InvariantViolation as exc:
        raise _bad_request(exc)


@app.post("/heuristics")
def api_heuristics(payload: GridModel):
    try:
        return heuristics_tool(payload.grid)
    except InvariantViolation as exc:
        raise _bad_request(exc)


@app.post("/solve")
def api_solve(req: SolveRequest):
    config = {
        "ranker": req.ranker,
        "value_order": req.value_order,
        "max_steps": req.max_steps,
        "precheck": req.precheck,
    }
    try:
        return solve_tool(grid=req.grid, triples=req.triples, config=config)
    except ValueError as exc:  # InvariantViolation included
        raise _bad_request(exc)
