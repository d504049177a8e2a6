import pytest

from team_portal.users.models import Student


@pytest.mark.django_db
class TestStudentManager:
    def test_create_user(self):
        student = Student.objects.create_user(
            register_number="REG42",
            student_id="22CS042",
            name="Asha Raman",
            email="asha@EXAMPLE.com",
            password="something-r@nd0m!",
        )
        assert student.register_number == "REG42"
        assert student.email == "asha@example.com"
        assert not student.is_staff
        assert not student.is_superuser
        assert student.check_password("something-r@nd0m!")

    def test_create_superuser(self):
        student = Student.objects.create_superuser(
            register_number="ADMIN1",
            student_id="ADM001",
            name="Admin",
            password="something-r@nd0m!",
        )
        assert student.is_staff
        assert student.is_superuser

    def test_register_number_required(self):
        with pytest.raises(ValueError, match="register number"):
            Student.objects.create_user(register_number="", student_id="X", password="x")
