from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

# ----------------------------------------
# Create / Update DTO
# ----------------------------------------
class StudentPayload(BaseModel):
    # clients may echo a full object back; the id in it is never stored
    id: Optional[int] = Field(None, description="Ignored, ids are assigned by the store")
    first_name: str = Field(..., alias="firstName", description="Student first name")
    last_name: str = Field(..., alias="lastName", description="Student last name")
    school: str = Field(..., description="School identifier or name")

    model_config = {
        "extra": "forbid",
        "populate_by_name": True,
    }

# ----------------------------------------
# Student Response DTO
# ----------------------------------------
class StudentSchema(BaseModel):
    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    school: str

    model_config = {
        "from_attributes": True,
        "populate_by_name": True,
    }


def payload_to_values(payload: StudentPayload) -> Dict[str, Any]:
    """Column values a payload is allowed to write. `id` is never one of them."""
    return {
        "first_name": payload.first_name,
        "last_name": payload.last_name,
        "school": payload.school,
    }


def student_to_wire(student) -> Dict[str, Any]:
    """Serialize a `Students` row to the camelCase wire object."""
    return StudentSchema.model_validate(student).model_dump(by_alias=True)
