from __future__ import annotations

from typing import List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from pkganalyzer.config import RunConfig
from pkganalyzer.errors import AnalyzerError
from pkganalyzer.model import AnalyzeResult
from pkganalyzer.pipeline import analyze as analyze_run


app = FastAPI(title="Package CMake Usage Analyzer")


class AnalyzeRequest(BaseModel):
	archives: List[str]
	jobs: int = 1


@app.post("/analyze", response_model=AnalyzeResult, response_model_by_alias=True)
def analyze(req: AnalyzeRequest) -> AnalyzeResult:
	config = RunConfig(archives=req.archives, jobs=req.jobs)
	try:
		return analyze_run(config)
	except AnalyzerError as e:
		raise HTTPException(status_code=400, detail=str(e))


def create_app() -> FastAPI:
	return app
