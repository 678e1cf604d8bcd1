import unittest

from movement import Movement, reverse_movements
from notation import Movements


class TestMovement(unittest.TestCase):

    def test_inverse(self):
        self.assertEqual(Movement('R', 1, '').inverse(), Movement('R', 1, "'"))
        self.assertEqual(Movement('R', 1, "'").inverse(), Movement('R', 1, ''))
        self.assertEqual(Movement('R', 1, '2').inverse(), Movement('R', 1, '2'))
        self.assertEqual(Movement('U', 2, '').inverse(), Movement('U', 2, "'"))
        self.assertEqual(Movement('M', 0, '').inverse(), Movement('M', 0, "'"))
        self.assertEqual(Movement('x', 0, "'").inverse(), Movement('x', 0, ''))

    def test_inverse_of_inverse(self):
        for movement in Movements("R U' F2 r' M2 E S' x y2 z'"):
            self.assertEqual(movement.inverse().inverse(), movement)

    def test_quarter_turns(self):
        self.assertEqual(Movement('F', 1, '').quarter_turns, 1)
        self.assertEqual(Movement('F', 1, '2').quarter_turns, 2)
        self.assertEqual(Movement('F', 1, "'").quarter_turns, 3)

    def test_categories(self):
        self.assertTrue(Movement('R', 2).is_face_turn())
        self.assertTrue(Movement('E').is_slice())
        self.assertTrue(Movement('z').is_rotation())
        self.assertFalse(Movement('z').is_face_turn())
        self.assertFalse(Movement('R').is_slice())

    def test_slices_and_axes_ignore_layers(self):
        self.assertEqual(Movement('M', 3).layers, 0)
        self.assertEqual(Movement('x', 1).layers, 0)

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            Movement('Q')
        with self.assertRaises(ValueError):
            Movement('R', 0)
        with self.assertRaises(ValueError):
            Movement('R', 1, '3')

    def test_str(self):
        self.assertEqual(str(Movement('R')), 'R')
        self.assertEqual(str(Movement('R', 2, "'")), "Rw'")
        self.assertEqual(str(Movement('R', 3, '2')), '3Rw2')
        self.assertEqual(str(Movement('y', 0, "'")), "y'")

    def test_immutable(self):
        movement = Movement('R')
        with self.assertRaises(AttributeError):
            movement.face = 'U'


class TestReverseMovements(unittest.TestCase):

    def test_reverse_order_and_inverse(self):
        movements = [Movement('R'), Movement('U', 1, '2'), Movement('F', 1, "'")]
        self.assertEqual(reverse_movements(movements), [
            Movement('F', 1, ''), Movement('U', 1, '2'), Movement('R', 1, "'"),
        ])

    def test_reverse_notation_string(self):
        self.assertEqual(reverse_movements("R U r' x"), [
            Movement('x', 0, "'"), Movement('R', 2, ''), Movement('U', 1, "'"), Movement('R', 1, "'"),
        ])

    def test_reverse_iterator(self):
        self.assertEqual(reverse_movements(Movements('R U')), [Movement('U', 1, "'"), Movement('R', 1, "'")])

    def test_reverse_empty(self):
        self.assertEqual(reverse_movements([]), [])
        self.assertEqual(reverse_movements(''), [])


if __name__ == '__main__':
    unittest.main()
