import unittest

from pydantic import ValidationError

from parkinglot.errors.errors import InvalidArgument
from parkinglot.parking_lot.parking_lot import ParkingLot, RemovalStatus


class TestParkingLot(unittest.TestCase):

    def get_lot(self, capacity, cars=()):
        lot = ParkingLot.create(str(capacity))
        for plate_number, colour in cars:
            lot.park(plate_number, colour)
        return lot

    def test_create_numbers_slots_from_one(self):
        lot = ParkingLot.create('5')
        assert lot.capacity == 5
        assert [slot.index for slot in lot.slots] == [1, 2, 3, 4, 5]
        assert all(slot.is_free() for slot in lot.slots)

    def test_create_rejects_non_numbers(self):
        for capacity in ['abc', '', '2.5', '1_0', '٣', ' 3']:
            with self.assertRaises(InvalidArgument):
                ParkingLot.create(capacity)

    def test_create_rejects_negative_capacity(self):
        with self.assertRaises(InvalidArgument):
            ParkingLot.create('-1')

    def test_zero_capacity_lot_is_full(self):
        lot = ParkingLot.create('0')
        assert lot.park('KA-01', 'White') is None

    def test_park_first_fit_until_full(self):
        lot = self.get_lot(3)
        assigned = [lot.park('KA-0' + str(i), 'White') for i in range(1, 4)]
        assert assigned == [1, 2, 3]
        assert lot.park('KA-04', 'White') is None
        assert [slot.plate_number for slot in lot.slots] == ['KA-01', 'KA-02', 'KA-03']

    def test_park_needs_plate_and_colour(self):
        lot = self.get_lot(2)
        with self.assertRaises(InvalidArgument):
            lot.park('KA-01', '')
        with self.assertRaises(InvalidArgument):
            lot.park('', '')
        assert all(slot.is_free() for slot in lot.slots)

    def test_remove_car_frees_slot_for_reuse(self):
        lot = self.get_lot(3, [('KA-01', 'White'), ('KA-02', 'Black'), ('KA-03', 'Red')])
        removal = lot.remove_car('2')
        assert removal.status == RemovalStatus.FREED
        assert removal.slot_number == 2
        assert lot.slots[1].is_free()
        assert lot.park('KA-04', 'Blue') == 2

    def test_remove_car_is_idempotent(self):
        lot = self.get_lot(2)
        assert lot.remove_car('1').status == RemovalStatus.FREED
        assert lot.remove_car('1').status == RemovalStatus.FREED
        assert lot.slots[0].is_free()

    def test_remove_car_beyond_capacity(self):
        lot = self.get_lot(2, [('KA-01', 'White')])
        assert lot.remove_car('3').status == RemovalStatus.DOES_NOT_EXIST
        assert lot.slots[0].plate_number == 'KA-01'

    def test_remove_car_below_first_slot(self):
        lot = self.get_lot(2)
        assert lot.remove_car('0').status == RemovalStatus.NOT_FOUND
        assert lot.remove_car('-4').status == RemovalStatus.NOT_FOUND

    def test_remove_car_rejects_non_numbers(self):
        lot = self.get_lot(2)
        for slot_number in ['one', '1_0', '٣']:
            with self.assertRaises(InvalidArgument):
                lot.remove_car(slot_number)

    def test_search_by_colour(self):
        lot = self.get_lot(3, [('KA-01', 'red'), ('KA-02', 'blue'), ('KA-03', 'red')])
        assert lot.slot_numbers_for_colour('red') == [1, 3]
        assert lot.plate_numbers_for_colour('red') == ['KA-01', 'KA-03']
        assert lot.slot_numbers_for_colour('green') == []

    def test_search_is_case_sensitive(self):
        lot = self.get_lot(1, [('KA-01', 'Red')])
        assert lot.slot_numbers_for_colour('red') == []

    def test_empty_colour_does_not_match_free_slots(self):
        lot = self.get_lot(3, [('KA-01', 'red')])
        assert lot.plate_numbers_for_colour('') == []
        assert lot.slot_number_for_plate('') is None

    def test_search_plate_returns_first_match(self):
        lot = self.get_lot(3, [('KA-01', 'red'), ('KA-02', 'blue'), ('KA-02', 'white')])
        assert lot.slot_number_for_plate('KA-02') == 2
        assert lot.slot_number_for_plate('KA-09') is None

    def test_slot_index_is_frozen(self):
        lot = self.get_lot(1)
        with self.assertRaises(ValidationError):
            lot.slots[0].index = 7
        assert lot.slots[0].index == 1


if __name__ == '__main__':
    unittest.main()
