from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from servicemap.config import ParserConfig
from servicemap.errors import DiscoveryError, ServiceMapError
from servicemap.model import ParseResult
from servicemap.parser import CommentParser


app = FastAPI(title="Service Map")


class ParseRequest(BaseModel):
	root_path: str
	recursive: bool = True
	strict_implicit: bool = False


@app.post("/parse", response_model=ParseResult, response_model_exclude_none=True)
def parse(req: ParseRequest) -> ParseResult:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")

	config = ParserConfig(recursive=req.recursive, strict_implicit=req.strict_implicit)
	try:
		return CommentParser(config).parse(root)
	except DiscoveryError as e:
		raise HTTPException(status_code=400, detail=str(e))
	except ServiceMapError as e:
		raise HTTPException(status_code=422, detail=str(e))


def create_app() -> FastAPI:
	return app
