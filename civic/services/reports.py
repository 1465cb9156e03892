"""Report submission flow: validate, read image, create."""

import logging
from pathlib import Path

from civic.models.issue import Issue, IssueDraft
from civic.services.images import read_image_as_data_url
from civic.services.issue_repository import IssueRepository
from civic.services.validation import ensure_valid

LOG = logging.getLogger("civic.services.reports")


async def submit_report(
    repository: IssueRepository,
    draft: IssueDraft,
    image_path: Path | str | None = None,
) -> Issue:
    """Create an issue from draft once the image read has finished.

    Invalid drafts raise SubmissionError before the image is touched.
    """
    ensure_valid(draft)
    image_data_url = await read_image_as_data_url(image_path)
    if image_data_url:
        LOG.debug("Attached image %s (%s chars)", image_path, len(image_data_url))
        draft = draft.model_copy(update={"image_data_url": image_data_url})
    return repository.create(draft)
