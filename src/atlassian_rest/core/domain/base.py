"""Base común de los modelos de recursos (Pydantic v2).

Las APIs de Atlassian usan camelCase; los modelos exponen snake_case y
aceptan/emiten camelCase vía alias. Los campos desconocidos se ignoran para
tolerar respuestas más ricas que el modelo.
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class AtlassianModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
