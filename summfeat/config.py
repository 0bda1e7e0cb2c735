from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from summfeat.errors import InvalidConfiguration
from summfeat.features.position import DEFAULT_RANK_CUTOFF
from summfeat.utils.io import load_yaml


class StopwordConfig(BaseModel):
    language: str = "english"
    extra: List[str] = Field(default_factory=list)
    punctuation: bool = True


class ParserConfig(BaseModel):
    language: str = "english"
    lowercase: bool = True


class FeatureConfig(BaseModel):
    # rank_cutoff is range-checked by the position scorer so a bad value
    # surfaces as InvalidConfiguration
    rank_cutoff: int = DEFAULT_RANK_CUTOFF
    parallel: bool = False
    stopwords: StopwordConfig = Field(default_factory=StopwordConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)


def parse_config(raw: Optional[Dict[str, Any]]) -> FeatureConfig:
    data = dict(raw or {})
    # configs may nest everything under a top-level "features" key
    if "features" in data and isinstance(data["features"], dict):
        data = data["features"]
    try:
        return FeatureConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e


def load_config(path: Optional[str] = None) -> FeatureConfig:
    if path is None:
        return FeatureConfig()
    return parse_config(load_yaml(path))
