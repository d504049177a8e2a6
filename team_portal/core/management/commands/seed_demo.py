"""
Seed command to populate database with demo data for frontend development.

Usage:
    python manage.py seed_demo
    python manage.py seed_demo --clear  # Clear existing demo data first
"""

import logging
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from team_portal.core.models import ApprovalState
from team_portal.projects.models import Project
from team_portal.projects.models import ProjectTheme
from team_portal.reviews.models import Review
from team_portal.reviews.models import ReviewAttachment
from team_portal.reviews.models import ReviewTemplate
from team_portal.teams.models import Team
from team_portal.users.models import Student
from team_portal.worklogs.models import WorkLog

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "demo123"
DEMO_REGISTER_PREFIX = "DEMO"

STUDENTS = [
    ("DEMO001", "22CS001", "Asha Raman", "CSE", "A"),
    ("DEMO002", "22CS002", "Karthik Iyer", "CSE", "A"),
    ("DEMO003", "22CS003", "Meera Nair", "CSE", "B"),
    ("DEMO004", "22CS004", "Rahul Das", "CSE", "B"),
    ("DEMO005", "22IT005", "Sneha Pillai", "IT", "A"),
]

TEMPLATES = [
    ("Proposal slides", "Slide deck for the proposal review", "Proposal"),
    ("Design document", "Architecture and design outline", "Design Review"),
    ("Report format", "Formatting rules for every submission", None),
]


class Command(BaseCommand):
    help = "Seed database with demo data for frontend development"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Clear existing demo data before seeding",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options["clear"]:
            self.clear_demo_data()

        self.stdout.write("Creating demo data...")

        students = [self.create_student(*row) for row in STUDENTS]
        lead = students[0]

        team = lead.team
        if team is None:
            team = Team.objects.create(team_lead=lead, theme="Campus tools", mentor="Dr. Varma")
            Student.objects.filter(id__in=[s.id for s in students[:3]]).update(team=team)
            self.stdout.write(f"  Created team {team.code} (3 members, 1 seat left)")

        project, created = Project.objects.get_or_create(
            team=team,
            defaults={
                "title": "Smart Attendance Tracker",
                "description": "Face-recognition based attendance for classrooms.",
                "theme": ProjectTheme.AI_ML,
                # Reviews open only for an approved project
                "approval": ApprovalState.APPROVED,
            },
        )
        if created:
            self.stdout.write(f"  Created project: {project.title}")

        self.create_work_logs(lead, team)
        self.create_reviews(team)
        self.create_templates()

        self.stdout.write(self.style.SUCCESS("\nDemo data created successfully!"))
        self.stdout.write("\nSummary:")
        self.stdout.write(f"  - {len(students)} Students ({', '.join(s.register_number for s in students)})")
        self.stdout.write(f"  - Team code: {team.code}")
        self.stdout.write(f"  - {Student.objects.filter(register_number__startswith=DEMO_REGISTER_PREFIX, team__isnull=True).count()} student(s) without team")
        self.stdout.write(f"\nDefault password for all students: {DEMO_PASSWORD}")

    def create_student(self, register_number, student_id, name, department, section):
        """Create a student if not exists."""
        student, created = Student.objects.get_or_create(
            register_number=register_number,
            defaults={
                "student_id": student_id,
                "name": name,
                "email": f"{register_number.lower()}@demo.edu",
                "department": department,
                "section": section,
                "is_active": True,
            },
        )
        if created:
            student.set_password(DEMO_PASSWORD)
            student.save()
            self.stdout.write(f"  Created student: {register_number} ({name})")
        return student

    def create_work_logs(self, student, team):
        if WorkLog.objects.filter(student=student).exists():
            return
        today = timezone.localdate()
        approved = WorkLog(
            student=student,
            team=team,
            date=today - timedelta(days=2),
            expected_task="Set up the repository and CI",
            completed_task="Repository created, CI pending",
        )
        approved.approve(comments="Good start.")
        approved.save()
        WorkLog.objects.create(
            student=student,
            team=team,
            date=today,
            expected_task="Collect a face dataset",
            completed_task="Gathered 200 images",
        )
        self.stdout.write(f"  Created 2 work logs for {student.register_number} (1 {ApprovalState.APPROVED.label})")

    def create_reviews(self, team):
        if team.reviews.exists():
            return
        proposal = Review.objects.create(
            team=team,
            stage="Proposal",
            is_completed=True,
            completed_on=timezone.localdate() - timedelta(days=7),
            result="Accepted with minor changes",
        )
        ReviewAttachment.objects.create(
            review=proposal,
            attachment_name="Proposal deck",
            link="https://example.com/proposal.pdf",
        )
        Review.objects.create(team=team, stage="Design Review")
        self.stdout.write("  Created 2 reviews (Proposal, Design Review)")

    def create_templates(self):
        for name, description, stage in TEMPLATES:
            ReviewTemplate.objects.get_or_create(
                name=name,
                defaults={"description": description, "review": stage, "link": "https://example.com/templates"},
            )
        self.stdout.write(f"  {len(TEMPLATES)} review templates created/verified")

    def clear_demo_data(self):
        """Clear existing demo data."""
        self.stdout.write("Clearing existing demo data...")

        demo_students = Student.objects.filter(register_number__startswith=DEMO_REGISTER_PREFIX)

        # Teams first: team_lead is PROTECT
        Team.objects.filter(team_lead__in=demo_students).delete()
        demo_students.delete()
        ReviewTemplate.objects.filter(name__in=[name for name, _, _ in TEMPLATES]).delete()

        self.stdout.write(self.style.WARNING("  Demo data cleared"))
