import unittest

from rubik.cube import Cube

from ncube    import NCube, UndefinedMovement, CubeError, face_transform
from movement import Movement, reverse_movements
from notation import Movements, InvalidFace
from defaults import FACES, DIRECTIONS
from utils    import face_counters


def grid(cube, face):
    n = cube.divisions()
    return cube.faces()[face].reshape(n, n)


def rubik_face_counters(cube_str):
    """
    Count colors of each face in `rubik.cube.Cube.flat_str()`:
    rows of U, then rows of L F R B, then rows of D
    """
    counters = {face : {} for face in FACES}
    def add(face, colors):
        for color in colors:
            counters[face][color] = counters[face].get(color, 0) + 1
    add('U', cube_str[:9])
    add('D', cube_str[45:])
    for row in range(3):
        line = cube_str[9 + row * 12 : 9 + (row + 1) * 12]
        for k, face in enumerate('LFRB'):
            add(face, line[k * 3 : (k + 1) * 3])
    return counters


class TestConstruction(unittest.TestCase):

    def test_solved_state(self):
        for n in (1, 2, 3, 4, 5):
            cube = NCube(n)
            self.assertEqual(cube.divisions(), n)
            self.assertTrue(cube.is_solved())
            faces = cube.faces()
            self.assertEqual(set(faces), set(FACES))
            for face in FACES:
                self.assertEqual(len(faces[face]), n * n)
                self.assertTrue((faces[face] == face).all())

    def test_invalid_divisions(self):
        with self.assertRaises(ValueError):
            NCube(0)

    def test_face_transform(self):
        self.assertEqual(face_transform(3).tolist(), [6, 3, 0, 7, 4, 1, 8, 5, 2])
        self.assertEqual(face_transform(2).tolist(), [2, 0, 3, 1])
        self.assertIs(face_transform(4), face_transform(4))

    def test_faces_are_read_only(self):
        cube = NCube(3)
        faces = cube.faces()
        with self.assertRaises(ValueError):
            faces['U'][0] = 'F'
        with self.assertRaises(TypeError):
            faces['U'] = faces['F']
        self.assertTrue(cube.is_solved())

    def test_flat_str(self):
        self.assertEqual(NCube(3).flat_str(), 'U' * 9 + ('L' * 3 + 'F' * 3 + 'R' * 3 + 'B' * 3) * 3 + 'D' * 9)
        self.assertEqual(len(NCube(4).flat_str()), 6 * 16)

    def test_str(self):
        lines = str(NCube(2)).split('\n')
        self.assertEqual(lines, ['   UU', '   UU', 'LL FF RR BB', 'LL FF RR BB', '   DD', '   DD'])

    def test_copy_and_equality(self):
        cube = NCube(3).turn('R U')
        copied = cube.copy()
        self.assertEqual(cube, copied)
        copied.apply(Movement('F'))
        self.assertNotEqual(cube, copied)
        self.assertNotEqual(NCube(2), NCube(3))


class TestFaceTurns(unittest.TestCase):

    def test_R(self):
        cube = NCube(3).turn('R')
        up, front, back, down = (cube.faces()[face] for face in 'UFBD')
        self.assertEqual(up[[2, 5, 8]].tolist(), ['F'] * 3)
        self.assertEqual(front[[2, 5, 8]].tolist(), ['D'] * 3)
        self.assertEqual(back[[0, 3, 6]].tolist(), ['U'] * 3)
        self.assertEqual(down[[2, 5, 8]].tolist(), ['B'] * 3)
        self.assertEqual(up[[0, 1, 3, 4, 6, 7]].tolist(), ['U'] * 6)
        self.assertTrue((cube.faces()['R'] == 'R').all())
        self.assertTrue((cube.faces()['L'] == 'L').all())

    def test_U(self):
        cube = NCube(3).turn('U')
        faces = cube.faces()
        self.assertEqual(faces['L'][:3].tolist(), ['F'] * 3)
        self.assertEqual(faces['F'][:3].tolist(), ['R'] * 3)
        self.assertEqual(faces['R'][:3].tolist(), ['B'] * 3)
        self.assertEqual(faces['B'][:3].tolist(), ['L'] * 3)
        self.assertEqual(faces['F'][3:].tolist(), ['F'] * 6)

    def test_F(self):
        cube = NCube(3).turn('F')
        faces = cube.faces()
        self.assertEqual(faces['R'][[0, 3, 6]].tolist(), ['U'] * 3)
        self.assertEqual(faces['D'][:3].tolist(), ['R'] * 3)
        self.assertEqual(faces['L'][[2, 5, 8]].tolist(), ['D'] * 3)
        self.assertEqual(faces['U'][6:].tolist(), ['L'] * 3)

    def test_strip_order_is_kept(self):
        cube = NCube(3).turn('U R')
        faces = cube.faces()
        # F top row came from R before the R turn
        self.assertEqual(faces['U'][[2, 5, 8]].tolist(), ['R', 'F', 'F'])
        # B left column is reversed into D right column
        self.assertEqual(faces['D'][[2, 5, 8]].tolist(), ['B', 'B', 'L'])
        # R top row of B labels is turned to the right column
        self.assertEqual(faces['R'][[2, 5, 8]].tolist(), ['B', 'B', 'B'])
        self.assertEqual(faces['R'][0], 'R')

    def test_negative_side_faces_mirror_positive_ones(self):
        # L turns the left column like R' does, D the bottom row like U'
        self.assertEqual(NCube(3).turn('L').faces()['U'][[0, 3, 6]].tolist(), ['B'] * 3)
        self.assertEqual(NCube(3).turn('D').faces()['F'][6:].tolist(), ['L'] * 3)
        self.assertEqual(NCube(3).turn('B').faces()['U'][:3].tolist(), ['R'] * 3)

    def test_wide_turn_on_4x4(self):
        cube = NCube(4).turn('Rw')
        up = grid(cube, 'U')
        self.assertTrue((up[:, 2:] == 'F').all())
        self.assertTrue((up[:, :2] == 'U').all())
        self.assertEqual(cube, NCube(4).turn('r'))

    def test_wide_equals_face_and_middle(self):
        self.assertEqual(NCube(3).turn('r'), NCube(3).turn("R M'"))
        self.assertEqual(NCube(3).turn("l'"), NCube(3).turn("L' M'"))
        self.assertEqual(NCube(3).turn('u2'), NCube(3).turn("U2 E2"))
        self.assertEqual(NCube(3).turn('f'), NCube(3).turn('F S'))

    def test_single_division_cube(self):
        cube = NCube(1).turn('R')
        self.assertEqual(cube.faces()['U'].tolist(), ['F'])
        self.assertEqual(cube.turn("R'"), NCube(1))

    def test_too_many_layers(self):
        cube = NCube(2).scramble(10, seed=1)
        before = cube.copy()
        with self.assertRaises(UndefinedMovement):
            cube.apply(Movement('R', 3))
        self.assertEqual(cube, before)
        with self.assertRaises(UndefinedMovement):
            NCube(1).apply(Movement('R', 2))


class TestSlicesAndRotations(unittest.TestCase):

    def test_slice_domain(self):
        for face in 'MES':
            NCube(3).apply(Movement(face))
            for n in (2, 4, 5):
                with self.assertRaises(UndefinedMovement) as context:
                    NCube(n).apply(Movement(face))
                self.assertEqual(context.exception.movement, Movement(face))
                self.assertIsInstance(context.exception, CubeError)

    def test_failed_slice_keeps_state(self):
        cube = NCube(4).scramble(20, seed=7)
        before = cube.copy()
        with self.assertRaises(UndefinedMovement):
            cube.apply(Movement('M', 0, '2'))
        self.assertEqual(cube, before)

    def test_failed_sequence_keeps_state(self):
        cube = NCube(4).turn('R U')
        before = cube.copy()
        with self.assertRaises(UndefinedMovement):
            cube.turn_("F M B")
        self.assertEqual(cube, before)
        with self.assertRaises(InvalidFace):
            cube.turn_("F Q B")
        self.assertEqual(cube, before)

    def test_slice_directions(self):
        faces = NCube(3).turn('M').faces()
        # M follows L: front middle column goes down
        self.assertEqual(faces['D'][[1, 4, 7]].tolist(), ['F'] * 3)
        faces = NCube(3).turn('E').faces()
        # E follows U: right middle row comes to the front
        self.assertEqual(faces['F'][3:6].tolist(), ['R'] * 3)
        self.assertEqual(faces['L'][3:6].tolist(), ['F'] * 3)
        self.assertEqual(NCube(3).turn('E'), NCube(3).turn("u U'"))
        faces = NCube(3).turn('S').faces()
        # S follows F: up middle row goes right
        self.assertEqual(faces['R'][[1, 4, 7]].tolist(), ['U'] * 3)

    def test_rotations_equal_layer_turns(self):
        self.assertEqual(NCube(3).turn('R U x'), NCube(3).turn("R U R M' L'"))
        self.assertEqual(NCube(3).turn('R U y'), NCube(3).turn("R U U E D'"))
        self.assertEqual(NCube(3).turn('R U z'), NCube(3).turn("R U F S B'"))

    def test_rotations_keep_solved(self):
        for n in (2, 3, 4):
            for axis in 'xyz':
                for direction in DIRECTIONS:
                    self.assertTrue(NCube(n).turn(axis + direction).is_solved())

    def test_rotations_move_faces(self):
        self.assertTrue((NCube(4).turn('x').faces()['F'] == 'D').all())
        self.assertTrue((NCube(4).turn('y').faces()['F'] == 'R').all())
        self.assertTrue((NCube(4).turn('z').faces()['U'] == 'L').all())
        self.assertTrue((NCube(4).turn("x'").faces()['F'] == 'U').all())


class TestProperties(unittest.TestCase):

    def test_face_only_turn_four_times(self):
        cube = NCube(4).scramble(30, seed=3)
        for face in FACES:
            before = cube.copy()
            for _ in range(4):
                cube._turn_face(face, 1)
            self.assertEqual(cube, before)

    def test_any_movement_four_times(self):
        for notation in ('R', 'Lw', 'U', 'd', 'F', 'B', 'M', 'E', 'S', 'x', 'y', 'z'):
            cube = NCube(3).scramble(15, seed=11)
            before = cube.copy()
            cube.turn_(' '.join([notation] * 4))
            self.assertEqual(cube, before, msg=notation)

    def test_inverse_cancellation(self):
        for n in (2, 3, 4, 5):
            candidates = [m for m in Movements("R U F L B D r u f l b d R2 U' x y' z2")]
            if n == 3:
                candidates += list(Movements("M E' S2"))
            for movement in candidates:
                if movement.layers > n:
                    continue
                cube = NCube(n).scramble(25, seed=n)
                before = cube.copy()
                cube.apply(movement)
                cube.apply(movement.inverse())
                self.assertEqual(cube, before, msg=f'{movement} on {n}x{n}x{n}')

    def test_sequence_inverse_cancellation(self):
        for n in (2, 3, 4, 5):
            for seed in range(5):
                cube = NCube(n).scramble(10, seed=seed)
                before = cube.copy()
                movements = NCube.get_scramble_movements(40, n, with_rotations=True, seed=seed + 100)
                cube.turn_(movements)
                cube.turn_(reverse_movements(movements))
                self.assertEqual(cube, before)

    def test_undo(self):
        cube = NCube(3)
        cube.turn_("R U2 r' M x F")
        cube.undo_("R U2 r' M x F")
        self.assertTrue(cube.is_solved())

    def test_commutator_order_six(self):
        cube = NCube(3)
        for i in range(6):
            for movement in Movements("R U R' U'"):
                cube.apply(movement)
            if i < 5:
                self.assertFalse(cube.is_solved())
        for face in FACES:
            self.assertTrue((cube.faces()[face] == face).all())

    def test_scramble_is_deterministic(self):
        self.assertEqual(NCube.get_scramble_movements(30, 4, seed=5), NCube.get_scramble_movements(30, 4, seed=5))
        self.assertEqual(NCube(4).scramble(30, seed=5), NCube(4).scramble(30, seed=5))
        self.assertFalse(any(m.is_slice() for m in NCube.get_scramble_movements(200, 4, seed=1)))
        self.assertFalse(any(m.is_rotation() for m in NCube.get_scramble_movements(200, 3, seed=1)))


class TestRubikCube(unittest.TestCase):

    def test_to_Cube(self):
        cube = NCube(3).turn('R U')
        self.assertEqual(cube.to_Cube().flat_str(), cube.flat_str())
        with self.assertRaises(ValueError):
            NCube(4).to_Cube()

    def test_face_colors_agree_with_rubik_cube(self):
        names = {'': '{}', "'": '{}i', '2': '{}'}
        for seed in range(10):
            movements = NCube.get_scramble_movements(25, 3, with_rotations=True, seed=seed)
            movements = [m for m in movements if m.is_face_turn() or m.face in 'xy']
            cube = NCube(3)
            reference = NCube(3).to_Cube()
            for movement in movements:
                cube.apply(movement)
                name = names[movement.direction].format(movement.face.upper())
                for _ in range(2 if movement.direction == '2' else 1):
                    getattr(Cube, name)(reference)
            expected = rubik_face_counters(reference.flat_str())
            for face, counter in face_counters(cube).items():
                self.assertEqual(dict(counter), expected[face], msg=f'face {face}, seed {seed}')


if __name__ == '__main__':
    unittest.main()
