from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel
from pydantic.alias_generators import to_camel

from travel_journal.core.clock import as_utc

# Naive datetimes are taken to be UTC so they compare with the store clock.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class JournalModel(BaseModel):
    """Base for persisted records: snake_case in Python, camelCase on disk."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }
