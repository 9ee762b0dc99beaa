"""FastAPI routes for compiling scripts."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from frostbite.errors import CompileError
from frostbite.models import CompileResult
from frostbite.pipeline import run_compile

router = APIRouter(prefix="/api")


# --- Request / Response models ---

class ScriptRequest(BaseModel):
    body: str


class CompileResponse(BaseModel):
    output: str
    required_methods: list[str]
    root_calls: list[str]
    unknown_roots: list[str]
    aliased_roots: list[str]
    input_size: int
    output_size: int


class GraphResponse(BaseModel):
    nodes: list[str]
    edges: dict[str, list[str]]
    required_methods: list[str]


def _run(body: str) -> CompileResult:
    try:
        return run_compile(body)
    except CompileError as e:
        raise HTTPException(400, str(e))


# --- Endpoints ---

@router.post("/compile", response_model=CompileResponse)
async def compile_script(req: ScriptRequest):
    result = _run(req.body)
    return CompileResponse(
        output=result.output,
        required_methods=result.required,
        root_calls=result.root_calls,
        unknown_roots=result.unknown_roots,
        aliased_roots=result.aliased_roots,
        input_size=result.input_size,
        output_size=result.output_size,
    )


@router.post("/graph", response_model=GraphResponse)
async def graph(req: ScriptRequest):
    result = _run(req.body)
    return GraphResponse(
        nodes=sorted(result.graph.nodes),
        edges=result.graph.edges,
        required_methods=result.required,
    )
