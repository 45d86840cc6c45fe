import logging
from typing import Optional

from pydantic import BaseModel, Field

from parkinglot.errors.errors import NotInitialized, ParkingLotError
from parkinglot.formatter.formatter import status_table
from parkinglot.lot_config.lot_config import LotConfig
from parkinglot.outcome.outcome import Exit, Fatal, Outcome, Recoverable
from parkinglot.parking_lot.parking_lot import ParkingLot, RemovalStatus

logger = logging.getLogger(__name__)

CREATE_PARKING_LOT_COMMAND = 'create_parking_lot'
PARKING_LOT_STATUS_COMMAND = 'status'
PARK_COMMAND = 'park'
REMOVE_CAR_COMMAND = 'leave'
SEARCH_COLOUR_FOR_PLATES_COMMAND = 'plate_numbers_for_cars_with_colour'
SEARCH_COLOUR_FOR_SLOTS_COMMAND = 'slot_numbers_for_cars_with_colour'
SEARCH_PLATE_FOR_SLOT_COMMAND = 'slot_number_for_registration_number'
HELP_COMMAND = 'help'
EXIT_COMMAND = 'exit'

LIST_OF_COMMANDS = [
    CREATE_PARKING_LOT_COMMAND,
    REMOVE_CAR_COMMAND,
    PARKING_LOT_STATUS_COMMAND,
    PARK_COMMAND,
    SEARCH_COLOUR_FOR_PLATES_COMMAND,
    SEARCH_COLOUR_FOR_SLOTS_COMMAND,
    SEARCH_PLATE_FOR_SLOT_COMMAND,
]

NOT_FOUND = 'Not found'
SLOT_NOT_FOUND = 'Not Found'
NO_LOT_MESSAGE = 'parking lot does not exist yet, please create a parking lot first'
UNKNOWN_COMMAND_MESSAGE = 'Command not recognized, type help for list of commands'


def parse(line: str):
    """Split a command line into (command, arg1, arg2).

    Missing arguments come back as empty strings, anything past the second
    argument is dropped.
    """
    split = line.split()
    command = split[0] if split else ''
    arg1 = split[1] if len(split) > 1 else ''
    arg2 = split[2] if len(split) > 2 else ''
    return command, arg1, arg2


class ParkingSession(BaseModel):
    lot: Optional[ParkingLot] = None

    def is_initialized(self):
        return self.lot is not None

    def require_lot(self) -> ParkingLot:
        if self.lot is None:
            raise NotInitialized('parking lot does not exist yet, invalid command')
        return self.lot


class CommandDispatcher(BaseModel):
    session: ParkingSession = Field(default_factory=ParkingSession)
    config: LotConfig = Field(default_factory=LotConfig)

    def dispatch(self, line: str) -> Outcome:
        command, arg1, arg2 = parse(line)
        logger.debug('dispatching %r with args %r %r', command, arg1, arg2)

        if command == EXIT_COMMAND:
            return Exit()

        handler = self.handlers().get(command)
        if handler is None:
            return Recoverable(lines=[UNKNOWN_COMMAND_MESSAGE])

        try:
            lines = handler(arg1, arg2)
        except ParkingLotError as e:
            logger.debug('fatal %s on %r: %s', type(e).__name__, line, e)
            return Fatal(error=str(e), error_type=type(e).__name__)

        return Recoverable(lines=lines)

    def handlers(self):
        return {
            CREATE_PARKING_LOT_COMMAND: self.create_parking_lot,
            PARK_COMMAND: self.park,
            PARKING_LOT_STATUS_COMMAND: self.status,
            REMOVE_CAR_COMMAND: self.leave,
            SEARCH_COLOUR_FOR_PLATES_COMMAND: self.plate_numbers_for_colour,
            SEARCH_COLOUR_FOR_SLOTS_COMMAND: self.slot_numbers_for_colour,
            SEARCH_PLATE_FOR_SLOT_COMMAND: self.slot_number_for_plate,
            HELP_COMMAND: self.help,
        }

    def create_parking_lot(self, capacity, _):
        # a bad capacity raises before the old lot is replaced
        self.session.lot = ParkingLot.create(capacity)
        return ['Created a parking lot with ' + str(self.session.lot.capacity) + ' slots']

    def park(self, plate_number, colour):
        slot_number = self.session.require_lot().park(plate_number, colour)
        if slot_number is None:
            return ['Sorry, parking lot is full']
        return ['Allocated Slot number ' + str(slot_number)]

    def status(self, *_):
        if not self.session.is_initialized():
            return [NO_LOT_MESSAGE]
        return status_table(
            self.session.lot.occupied_slots(),
            self.config.min_column_width,
            self.config.column_padding
        )

    def leave(self, slot_number, _):
        lot = self.session.lot or ParkingLot()
        removal = lot.remove_car(slot_number)
        if removal.status == RemovalStatus.DOES_NOT_EXIST:
            return ['parking slot does not exist']
        if removal.status == RemovalStatus.NOT_FOUND:
            return [SLOT_NOT_FOUND]
        return ['Slot number ' + str(removal.slot_number) + ', is free']

    def plate_numbers_for_colour(self, colour, _):
        lot = self.session.lot or ParkingLot()
        plate_numbers = lot.plate_numbers_for_colour(colour)
        if not plate_numbers:
            return [NOT_FOUND]
        return [', '.join(plate_numbers)]

    def slot_numbers_for_colour(self, colour, _):
        lot = self.session.lot or ParkingLot()
        slot_numbers = lot.slot_numbers_for_colour(colour)
        if not slot_numbers:
            return [NOT_FOUND]
        return [', '.join(str(slot_number) for slot_number in slot_numbers)]

    def slot_number_for_plate(self, plate_number, _):
        lot = self.session.lot or ParkingLot()
        slot_number = lot.slot_number_for_plate(plate_number)
        if slot_number is None:
            return [NOT_FOUND]
        return [str(slot_number)]

    def help(self, *_):
        return ['Commands are ' + ', '.join(LIST_OF_COMMANDS)]
