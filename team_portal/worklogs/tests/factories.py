import datetime

from django.utils import timezone
from factory import LazyFunction
from factory import SelfAttribute
from factory import SubFactory
from factory.django import DjangoModelFactory

from team_portal.users.tests.factories import StudentFactory
from team_portal.worklogs.models import WorkLog


class WorkLogFactory(DjangoModelFactory[WorkLog]):
    student = SubFactory(StudentFactory)
    team = SelfAttribute("student.team")
    date = LazyFunction(lambda: timezone.localdate() - datetime.timedelta(days=1))
    expected_task = "Write the login page"
    completed_task = "Login page done"

    class Meta:
        model = WorkLog
