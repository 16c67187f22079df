from pydantic import BaseModel

class Summary(BaseModel):
    style: str = "real_extractive_narrative"
    detail_level: str = "high"
    content: str
