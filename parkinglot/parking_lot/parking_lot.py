from collections import namedtuple
from enum import Enum
import logging
import re
from typing import List, Optional

from pydantic import BaseModel

from parkinglot.errors.errors import InvalidArgument
from parkinglot.slot.slot import Slot

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class RemovalStatus(str, Enum):
    FREED = 'freed'
    DOES_NOT_EXIST = 'does_not_exist'
    NOT_FOUND = 'not_found'


Removal = namedtuple('Removal', ('status', 'slot_number'))


def parse_int(value: str, what: str) -> int:
    # plain ascii digits only, no underscores or other scripts
    if not INTEGER_RE.fullmatch(value):
        raise InvalidArgument(
            'invalid ' + what + ' "' + value + '", please type in a valid number'
        )
    return int(value)


class ParkingLot(BaseModel):
    slots: List[Slot] = []

    @classmethod
    def create(cls, capacity: str):
        """Build an empty lot from the raw capacity argument.

        The capacity has to be a non-negative integer, slots are numbered
        1..capacity. Raises InvalidArgument otherwise.
        """
        n_slots = parse_int(capacity, 'amount of parking slots')
        if n_slots < 0:
            raise InvalidArgument(
                'invalid amount of parking slots "' + capacity + '", please type in a valid number'
            )
        logger.debug('creating parking lot with %d slots', n_slots)
        return cls(slots=[Slot(index=i) for i in range(1, n_slots + 1)])

    @property
    def capacity(self):
        return len(self.slots)

    def occupied_slots(self):
        return [slot for slot in self.slots if slot.is_occupied()]

    def first_free_slot(self) -> Optional[Slot]:
        for slot in self.slots:
            if slot.is_free():
                return slot
        return None

    def park(self, plate_number: str, colour: str) -> Optional[int]:
        """Put the car in the lowest numbered free slot.

        Returns the slot number, or None when the lot is full.
        """
        if not plate_number or not colour:
            raise InvalidArgument('park needs both a plate number and a colour')

        slot = self.first_free_slot()
        if slot is None:
            logger.debug('no free slot for %s', plate_number)
            return None

        slot.occupy(plate_number, colour)
        logger.debug('allocated slot %d to %s', slot.index, plate_number)
        return slot.index

    def remove_car(self, slot_number: str) -> Removal:
        slot_index = parse_int(slot_number, 'parking slot number')
        if slot_index > self.capacity:
            return Removal(RemovalStatus.DOES_NOT_EXIST, slot_index)

        for slot in self.slots:
            if slot.index == slot_index:
                # clearing a free slot is a no-op
                slot.clear()
                logger.debug('slot %d freed', slot_index)
                return Removal(RemovalStatus.FREED, slot_index)

        return Removal(RemovalStatus.NOT_FOUND, slot_index)

    def plate_numbers_for_colour(self, colour: str) -> List[str]:
        return [slot.plate_number for slot in self.occupied_slots() if slot.colour == colour]

    def slot_numbers_for_colour(self, colour: str) -> List[int]:
        return [slot.index for slot in self.occupied_slots() if slot.colour == colour]

    def slot_number_for_plate(self, plate_number: str) -> Optional[int]:
        # plates are not unique, the first match wins
        for slot in self.occupied_slots():
            if slot.plate_number == plate_number:
                return slot.index
        return None
