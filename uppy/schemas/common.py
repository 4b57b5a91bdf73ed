from typing import Annotated
from pydantic import BaseModel, Field

# keys and filenames are otherwise passed through untouched
NonEmptyStr = Annotated[str, Field(min_length=1)]

class OkResponse(BaseModel):
    ok: bool = True
