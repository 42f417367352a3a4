from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

class EmailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email_content: Optional[str] = Field(default=None, alias="emailContent")
    tone: Optional[str] = None

    @field_validator("email_content", "tone", mode="before")
    @classmethod
    def scalar_to_text(cls, v):
        # JSON numbers and booleans bind as their text form
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v
