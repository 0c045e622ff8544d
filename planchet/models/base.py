from pydantic import BaseModel, ConfigDict


class NumistaModel(BaseModel):
    """
    Base for records decoded from Numista responses.

    Records are read-only snapshots. Unknown fields are ignored so new
    API fields do not break decoding.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
