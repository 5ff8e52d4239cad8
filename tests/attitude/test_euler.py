import unittest
import numpy as np
from pyattitude.attitude.euler import (
    EulerOrder, parse_euler_order, euler_orders,
    euler2quat, euler2dcm, dcm2euler, quat2euler
)
from pyattitude.attitude.quaternion import Quaternion


def rot(axis, angle):
    """Active right-handed rotation matrix about a principal axis"""
    c, s = np.cos(angle), np.sin(angle)
    if axis == 'X':
        return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])
    if axis == 'Y':
        return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def same_rotation(q1, q2, tol):
    a, b = q1.as_array(), q2.as_array()
    return np.allclose(a, b, atol=tol) or np.allclose(a, -b, atol=tol)


class TestEulerOrder(unittest.TestCase):

    def test_twelve_orders(self):
        orders = euler_orders()
        self.assertEqual(len(orders), 12)
        codes = [code for code, _, _ in orders]
        self.assertEqual(codes, ['XYZ', 'XZY', 'YXZ', 'YZX', 'ZXY', 'ZYX',
                                 'XYX', 'XZX', 'YXY', 'YZY', 'ZXZ', 'ZYZ'])
        for code, family, _ in orders:
            if code[0] == code[2]:
                self.assertEqual(family, 'Proper Euler')
            else:
                self.assertEqual(family, 'Tait-Bryan')

    def test_common_names(self):
        self.assertEqual(EulerOrder.XYZ.common_name, 'Roll-Pitch-Yaw')
        self.assertEqual(EulerOrder.ZYX.common_name, 'Yaw-Pitch-Roll (Aerospace)')
        self.assertEqual(EulerOrder.ZXZ.common_name, 'Classical Euler (Precession)')
        self.assertEqual(EulerOrder.YZX.common_name, '')

    def test_from_string_case_insensitive(self):
        self.assertIs(EulerOrder.from_string('zxz'), EulerOrder.ZXZ)
        self.assertIs(EulerOrder.from_string('yXz'), EulerOrder.YXZ)
        self.assertIsNone(EulerOrder.from_string('XYZW'))
        self.assertIsNone(EulerOrder.from_string(None))

    def test_parse_falls_back_to_zyx(self):
        self.assertIs(parse_euler_order('bogus'), EulerOrder.ZYX)
        self.assertIs(parse_euler_order(''), EulerOrder.ZYX)
        self.assertIs(parse_euler_order(42), EulerOrder.ZYX)
        self.assertIs(parse_euler_order('xyx'), EulerOrder.XYX)
        self.assertIs(parse_euler_order(EulerOrder.YZY), EulerOrder.YZY)


class TestEulerComposition(unittest.TestCase):

    def test_matches_matrix_product(self):
        # Order 'ABC' is R_A(angle1) R_B(angle2) R_C(angle3)
        angles = (0.3, -0.7, 1.2)
        for order in EulerOrder:
            code = order.code
            expected = rot(code[0], angles[0]) @ rot(code[1], angles[1]) @ rot(code[2], angles[2])
            np.testing.assert_allclose(euler2dcm(*angles, order), expected, atol=1e-12,
                                       err_msg=f"Composition failed for {code}")

    def test_single_axis(self):
        q = euler2quat(0.8, 0.0, 0.0, 'ZYX')
        expected = Quaternion.from_axis_angle([0.0, 0.0, 1.0], 0.8)
        np.testing.assert_allclose(q.as_array(), expected.as_array(), atol=1e-12)

        q = euler2quat(0.0, 0.0, 0.8, 'ZYX')
        expected = Quaternion.from_axis_angle([1.0, 0.0, 0.0], 0.8)
        np.testing.assert_allclose(q.as_array(), expected.as_array(), atol=1e-12)

    def test_result_is_normalized(self):
        for order in EulerOrder:
            q = euler2quat(10.0, -4.0, 7.5, order)
            self.assertAlmostEqual(q.norm(), 1.0, places=12)
            self.assertGreaterEqual(q.w, 0.0)

    def test_zero_angles_give_identity(self):
        for order in EulerOrder:
            q = euler2quat(0.0, 0.0, 0.0, order)
            np.testing.assert_allclose(q.as_array(), [1.0, 0.0, 0.0, 0.0])


class TestEulerRoundTrip(unittest.TestCase):

    def setUp(self):
        self.quaternions = [
            Quaternion.from_axis_angle([1.0, 2.0, 3.0], np.pi / 5),
            Quaternion.from_axis_angle([-0.3, 0.8, 0.5], 1.1),
            Quaternion.from_axis_angle([2.0, -1.0, 0.5], 2.7),
            Quaternion.from_axis_angle([0.1, 0.1, -1.0], 0.4),
            Quaternion(0.2, -0.6, 0.7, 0.3),
        ]

    def test_round_trip_all_orders(self):
        for q in self.quaternions:
            for order in EulerOrder:
                e = quat2euler(q, order)
                self.assertIsNone(e.gimbal_lock)
                self.assertEqual(e.order, order.code)
                q2 = euler2quat(e.angle1, e.angle2, e.angle3, order)
                self.assertTrue(same_rotation(q, q2, 1e-6),
                                f"Round trip failed for {order.code}: {q} -> {q2}")

    def test_angle_ranges(self):
        for q in self.quaternions:
            for order in EulerOrder:
                e = quat2euler(q, order)
                if order.is_proper:
                    self.assertTrue(0.0 <= e.angle2 <= np.pi)
                else:
                    self.assertTrue(-np.pi/2 <= e.angle2 <= np.pi/2)

    def test_known_zyx_angles(self):
        q = euler2quat(0.5, 0.25, -0.4, 'ZYX')
        e = quat2euler(q, 'ZYX')
        np.testing.assert_allclose(e.angles, [0.5, 0.25, -0.4], atol=1e-12)


class TestGimbalLock(unittest.TestCase):

    def test_xyz_positive_lock(self):
        C = euler2dcm(0.3, np.pi/2, 0.2, 'XYZ')
        self.assertAlmostEqual(C[0, 2], 1.0, places=12)

        e = dcm2euler(C, 'XYZ')
        self.assertIsNotNone(e.gimbal_lock)
        self.assertEqual(e.gimbal_lock.lock_type, 'positive')
        self.assertEqual(e.angle2, np.pi/2)
        self.assertEqual(e.angle3, 0.0)
        self.assertAlmostEqual(e.angle1, 0.5, places=9)
        self.assertEqual(e.gimbal_lock.combined_angle, e.angle1)

    def test_xyz_negative_lock(self):
        C = euler2dcm(0.3, -np.pi/2, 0.2, 'XYZ')
        self.assertAlmostEqual(C[0, 2], -1.0, places=12)

        e = dcm2euler(C, 'XYZ')
        self.assertIsNotNone(e.gimbal_lock)
        self.assertEqual(e.gimbal_lock.lock_type, 'negative')
        self.assertEqual(e.angle2, -np.pi/2)
        self.assertEqual(e.angle3, 0.0)
        self.assertAlmostEqual(e.angle1, 0.1, places=9)

    def test_all_orders_both_polarities(self):
        for order in EulerOrder:
            if order.is_proper:
                cases = [(0.0, 'positive'), (np.pi, 'negative')]
            else:
                cases = [(np.pi/2, 'positive'), (-np.pi/2, 'negative')]
            for angle2, lock_type in cases:
                C = euler2dcm(0.3, angle2, 0.2, order)
                e = dcm2euler(C, order)
                msg = f"{order.code} angle2={angle2}"
                self.assertIsNotNone(e.gimbal_lock, msg)
                self.assertEqual(e.gimbal_lock.lock_type, lock_type, msg)
                self.assertEqual(e.angle2, angle2, msg)
                self.assertEqual(e.angle3, 0.0, msg)
                self.assertAlmostEqual(e.gimbal_lock.combined_angle, e.angle1, msg=msg)
                # The collapsed angles still describe the same rotation
                np.testing.assert_allclose(euler2dcm(e.angle1, e.angle2, e.angle3, order), C,
                                           atol=1e-9, err_msg=msg)

    def test_identity_locks_proper_orders(self):
        for order in EulerOrder:
            e = quat2euler(Quaternion.identity(), order)
            if order.is_proper:
                self.assertIsNotNone(e.gimbal_lock)
                self.assertEqual(e.gimbal_lock.lock_type, 'positive')
                self.assertEqual(e.angle2, 0.0)
            else:
                self.assertIsNone(e.gimbal_lock)
            self.assertAlmostEqual(e.angle1, 0.0, places=12)

    def test_near_lock_within_threshold(self):
        # Pitch 1e-4 rad short of 90 deg: sin(pitch) is within 1e-6 of 1
        C = euler2dcm(0.4, np.pi/2 - 1e-4, -0.1, 'ZYX')
        e = dcm2euler(C, 'ZYX')
        self.assertIsNotNone(e.gimbal_lock)
        self.assertEqual(e.angle2, np.pi/2)

        # Outside the threshold the decomposition is regular
        C = euler2dcm(0.4, np.pi/2 - 1e-2, -0.1, 'ZYX')
        e = dcm2euler(C, 'ZYX')
        self.assertIsNone(e.gimbal_lock)
        np.testing.assert_allclose(e.angles, [0.4, np.pi/2 - 1e-2, -0.1], atol=1e-9)


if __name__ == '__main__':
    unittest.main()
