# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from solver.solver_core import GridGeometry
from solver.sudoku_tools import compute_candidates_tool, next_move, solve_rows

app = FastAPI(title="Sudoku Solver Tool API")


class GridModel(BaseModel):
    grid: list[list[int]]
    block: int | None = None


class CandidatesModel(BaseModel):
    candidates: dict[str, list[int]]


def _geometry(payload: GridModel) -> GridGeometry:
    try:
        return GridGeometry(len(payload.grid), payload.block)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/solve")
def api_solve(payload: GridModel):
    try:
        return solve_rows(payload.grid, _geometry(payload))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/compute_candidates", response_model=CandidatesModel)
def api_cands(payload: GridModel):
    try:
        return compute_candidates_tool(payload.grid, _geometry(payload))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/next_move")
def api_next_move(payload: GridModel):
    try:
        return {"move": next_move(payload.grid, _geometry(payload))}
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
