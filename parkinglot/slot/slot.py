from typing import Optional

from pydantic import BaseModel, Field


class Slot(BaseModel):
    index: int = Field(frozen=True)
    plate_number: Optional[str] = None
    colour: Optional[str] = None

    def is_free(self):
        return self.plate_number is None and self.colour is None

    def is_occupied(self):
        return not self.is_free()

    def occupy(self, plate_number: str, colour: str):
        self.plate_number = plate_number
        self.colour = colour

    def clear(self):
        self.plate_number = None
        self.colour = None
