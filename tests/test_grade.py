import unittest
from decimal import Decimal

from pycalc import Course, GradeScale, calculate_grades, convert_score, grade_to_point

class TestGradeToPoint(unittest.TestCase):

    def test_scales(self):
        self.assertEqual(grade_to_point('A+', GradeScale.FOUR_FIVE), 4.5)
        self.assertEqual(grade_to_point('A+', 4.3), 4.3)
        self.assertEqual(grade_to_point('A-', 4.3), 3.7)

    def test_unknown_grade_scores_zero(self):
        self.assertEqual(grade_to_point('A-', 4.5), 0)
        self.assertEqual(grade_to_point('P', 4.3), 0)

    def test_unknown_scale(self):
        with self.assertRaises(ValueError):
            grade_to_point('A', 4.0)

class TestCalculateGrades(unittest.TestCase):

    def test_total_and_major(self):
        courses = [
            Course('Linear Algebra', 3, 'A+', is_major=True),
            Course('Data Structures', 3, 'B', is_major=True),
            Course('Korean Literature', 2, 'C+'),
        ]
        result = calculate_grades(courses)
        self.assertEqual(result.total_gpa_4_5, Decimal('3.44'))
        self.assertEqual(result.total_gpa_4_3, Decimal('3.31'))
        self.assertEqual(result.major_gpa_4_5, Decimal('3.75'))
        self.assertEqual(result.major_gpa_4_3, Decimal('3.65'))
        self.assertEqual(result.total_credits, 8)
        self.assertEqual(result.major_credits, 6)

    def test_without_major_courses(self):
        result = calculate_grades([Course('Tennis', 1, 'A')])
        self.assertEqual(result.total_gpa_4_5, Decimal('4.00'))
        self.assertEqual(result.major_gpa_4_5, Decimal('0'))
        self.assertEqual(result.major_credits, 0)

class TestConvertScore(unittest.TestCase):

    def test_conversion(self):
        self.assertEqual(convert_score(4.3, 4.3), Decimal('4.50'))
        self.assertEqual(convert_score(4.5, GradeScale.FOUR_FIVE), Decimal('4.30'))
        self.assertEqual(convert_score(3.5, 4.5), Decimal('3.34'))

    def test_unknown_scale(self):
        with self.assertRaises(ValueError):
            convert_score(3.0, 5.0)

if __name__ == '__main__':
    unittest.main()
