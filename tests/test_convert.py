import json
import unittest
import numpy as np
import pyattitude
from pyattitude.convert import (
    convert_from_quaternion, convert_from_euler, convert_from_mrp,
    convert_from_axis_angle, convert_from_rotation_matrix,
    from_quaternion, from_euler, from_mrp, from_axis_angle, from_rotation_matrix,
    degrees_to_radians, radians_to_degrees, get_euler_orders, version
)


def quat_array(result):
    q = result['quaternion']
    return np.array([q['w'], q['x'], q['y'], q['z']])


class TestConvertEntryPoints(unittest.TestCase):

    def assert_consistent(self, result):
        """All five views of a JSON result describe the same rotation"""
        q = pyattitude.Quaternion.from_array(quat_array(result))
        C = np.array(result['rotation_matrix']['matrix'])
        np.testing.assert_allclose(C, q.to_rotation_matrix(), atol=1e-12)

        e = result['euler']
        C_euler = pyattitude.euler2dcm(e['angle1'], e['angle2'], e['angle3'], e['order'])
        np.testing.assert_allclose(C_euler, C, atol=1e-6)

        m = result['mrp']
        q_mrp = pyattitude.mrp2quat(pyattitude.MrpData(m['sigma1'], m['sigma2'], m['sigma3'],
                                                       m['is_shadow']))
        np.testing.assert_allclose(q_mrp.to_rotation_matrix(), C, atol=1e-9)

        aa = result['axis_angle']
        q_aa = pyattitude.Quaternion.from_axis_angle(aa['axis'], aa['angle'])
        np.testing.assert_allclose(q_aa.to_rotation_matrix(), C, atol=1e-9)

    def test_from_quaternion(self):
        result = json.loads(convert_from_quaternion(2.0, 0.4, -1.0, 0.6, 'xyz', True))
        q = quat_array(result)
        self.assertAlmostEqual(np.linalg.norm(q), 1.0, places=12)
        self.assertEqual(result['euler']['order'], 'XYZ')
        self.assert_consistent(result)

    def test_from_quaternion_sign_canonicalized(self):
        result = json.loads(convert_from_quaternion(-0.9, 0.1, 0.2, 0.3, 'ZYX', False))
        self.assertGreaterEqual(result['quaternion']['w'], 0.0)
        self.assertLess(result['quaternion']['x'], 0.0)

    def test_from_euler(self):
        result = json.loads(convert_from_euler(0.3, -0.2, 1.1, 'ZXZ', True))
        self.assertEqual(result['euler']['order'], 'ZXZ')
        # Proper Euler angle2 is reported in [0, pi]
        self.assertAlmostEqual(result['euler']['angle2'], 0.2, places=9)
        self.assert_consistent(result)

    def test_from_euler_returns_input_angles(self):
        result = json.loads(convert_from_euler(0.4, 0.3, -0.2, 'YZX', True))
        e = result['euler']
        np.testing.assert_allclose([e['angle1'], e['angle2'], e['angle3']], [0.4, 0.3, -0.2],
                                   atol=1e-12)
        self.assertIsNone(e['gimbal_lock'])

    def test_from_euler_fallback(self):
        result = json.loads(convert_from_euler(0.0, 0.0, 0.0, 'bogus', False))
        self.assertEqual(result['euler']['order'], 'ZYX')
        self.assertEqual(result['quaternion'], {'w': 1.0, 'x': 0.0, 'y': 0.0, 'z': 0.0})

    def test_from_euler_gimbal_lock(self):
        result = json.loads(convert_from_euler(0.2, np.pi/2, 0.1, 'XYZ', True))
        lock = result['euler']['gimbal_lock']
        self.assertEqual(lock['lock_type'], 'positive')
        self.assertAlmostEqual(lock['combined_angle'], 0.3, places=9)
        self.assertEqual(result['euler']['angle3'], 0.0)
        self.assert_consistent(result)

    def test_from_mrp(self):
        result = json.loads(convert_from_mrp(0.1, -0.2, 0.3, False, 'ZYX', True))
        m = result['mrp']
        np.testing.assert_allclose([m['sigma1'], m['sigma2'], m['sigma3']], [0.1, -0.2, 0.3],
                                   atol=1e-12)
        self.assertFalse(m['is_shadow'])
        self.assert_consistent(result)

    def test_from_mrp_shadow_input(self):
        # A shadow-flagged triple is reconstructed with the same formula; its
        # canonical MRP view is the primary set
        sigma = np.array([0.4, 0.0, -0.8])
        shadow = -sigma / np.dot(sigma, sigma)
        result = json.loads(convert_from_mrp(*shadow, True, 'ZYX', True))
        m = result['mrp']
        np.testing.assert_allclose([m['sigma1'], m['sigma2'], m['sigma3']], sigma, atol=1e-12)

    def test_from_axis_angle(self):
        result = json.loads(convert_from_axis_angle(0.0, 3.0, 0.0, np.pi/3, 'YXY', True))
        aa = result['axis_angle']
        np.testing.assert_allclose(aa['axis'], [0.0, 1.0, 0.0], atol=1e-12)
        self.assertAlmostEqual(aa['angle'], np.pi/3, places=12)
        self.assert_consistent(result)

    def test_from_axis_angle_zero_axis(self):
        result = json.loads(convert_from_axis_angle(0.0, 0.0, 0.0, 1.0, 'ZYX', True))
        self.assertEqual(result['quaternion'], {'w': 1.0, 'x': 0.0, 'y': 0.0, 'z': 0.0})
        self.assertEqual(result['axis_angle'], {'axis': [1.0, 0.0, 0.0], 'angle': 0.0})

    def test_from_rotation_matrix(self):
        C = pyattitude.euler2dcm(0.5, -0.3, 0.8, 'ZYX')
        result = json.loads(convert_from_rotation_matrix(C.tolist(), 'ZYX', True))
        e = result['euler']
        np.testing.assert_allclose([e['angle1'], e['angle2'], e['angle3']], [0.5, -0.3, 0.8],
                                   atol=1e-12)
        self.assert_consistent(result)

    def test_zero_quaternion_is_total(self):
        result = json.loads(convert_from_quaternion(0.0, 0.0, 0.0, 0.0, 'ZYX', True))
        self.assertEqual(result['quaternion'], {'w': 0.0, 'x': 0.0, 'y': 0.0, 'z': 0.0})
        for value in result['rotation_matrix']['matrix'][0]:
            self.assertTrue(np.isfinite(value))


class TestStructuredEntryPoints(unittest.TestCase):

    def test_defaults(self):
        result = from_quaternion(1.0, 0.0, 0.0, 0.0)
        self.assertEqual(result.euler.order, 'ZYX')

    def test_all_entry_points_agree(self):
        q = pyattitude.Quaternion.from_axis_angle([0.3, -0.5, 0.8], 1.3)
        r_q = from_quaternion(q.w, q.x, q.y, q.z, 'YXZ')
        r_e = from_euler(r_q.euler.angle1, r_q.euler.angle2, r_q.euler.angle3, 'YXZ')
        r_m = from_mrp(r_q.mrp.sigma1, r_q.mrp.sigma2, r_q.mrp.sigma3, r_q.mrp.is_shadow, 'YXZ')
        r_a = from_axis_angle(*r_q.axis_angle.axis, r_q.axis_angle.angle, 'YXZ')
        r_c = from_rotation_matrix(r_q.rotation_matrix.matrix, 'YXZ')
        for other in (r_e, r_m, r_a, r_c):
            np.testing.assert_allclose(
                [other.quaternion.w, other.quaternion.x, other.quaternion.y, other.quaternion.z],
                q.as_array(), atol=1e-9)

    def test_results_are_independent(self):
        r1 = from_euler(0.1, 0.2, 0.3)
        r2 = from_euler(0.1, 0.2, 0.3)
        r1.rotation_matrix.matrix[0, 0] = 99.0
        self.assertNotEqual(r2.rotation_matrix.matrix[0, 0], 99.0)


class TestUtilities(unittest.TestCase):

    def test_degrees_to_radians(self):
        self.assertAlmostEqual(degrees_to_radians(180.0), np.pi, places=15)
        self.assertAlmostEqual(degrees_to_radians(90.0), np.pi/2, places=15)

    def test_radians_to_degrees(self):
        self.assertAlmostEqual(radians_to_degrees(np.pi), 180.0, places=12)
        self.assertAlmostEqual(radians_to_degrees(degrees_to_radians(37.5)), 37.5, places=12)

    def test_get_euler_orders(self):
        orders = json.loads(get_euler_orders())
        self.assertEqual(len(orders), 12)
        self.assertIn(['ZYX', 'Tait-Bryan', 'Yaw-Pitch-Roll (Aerospace)'], orders)
        self.assertIn(['ZXZ', 'Proper Euler', 'Classical Euler (Precession)'], orders)

    def test_version(self):
        self.assertEqual(version(), '0.1.0')
        self.assertEqual(version(), pyattitude.__version__)


if __name__ == '__main__':
    unittest.main()
