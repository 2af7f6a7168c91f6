from pydantic import BaseModel, ConfigDict


class ResubmitRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    step: int
