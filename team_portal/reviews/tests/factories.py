from factory import Sequence
from factory import SubFactory
from factory.django import DjangoModelFactory

from team_portal.reviews.models import Review
from team_portal.reviews.models import ReviewAttachment
from team_portal.reviews.models import ReviewTemplate
from team_portal.teams.tests.factories import TeamFactory


class ReviewFactory(DjangoModelFactory[Review]):
    team = SubFactory(TeamFactory)
    stage = "Proposal"

    class Meta:
        model = Review


class ReviewAttachmentFactory(DjangoModelFactory[ReviewAttachment]):
    review = SubFactory(ReviewFactory)
    attachment_name = Sequence(lambda n: f"Document {n}")
    link = "https://example.com/doc.pdf"

    class Meta:
        model = ReviewAttachment


class ReviewTemplateFactory(DjangoModelFactory[ReviewTemplate]):
    name = Sequence(lambda n: f"Template {n}")
    description = "Reference material"
    link = "https://example.com/template"
    review = "Proposal"

    class Meta:
        model = ReviewTemplate
