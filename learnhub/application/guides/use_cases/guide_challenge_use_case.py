"""Use case for relating challenges to guides."""

from uuid import UUID

import structlog

from learnhub.application.common.unit_of_work import UnitOfWork
from learnhub.application.guides.protocols.guide_repository import GuideRepositoryProtocol
from learnhub.application.guides.use_cases.guide_access import load_modifiable_guide
from learnhub.domain.common.value_objects.ids import ChallengeId
from learnhub.domain.guides.entities.guide import Guide
from learnhub.domain.identity.caller import Caller

logger = structlog.get_logger(__name__)


class GuideChallengeUseCase:
    """
    Use case for guide challenges.

    Adding a challenge records a GuideChallengeAdded event that is published
    once the transaction commits.
    """

    def __init__(self, guide_repository: GuideRepositoryProtocol, uow: UnitOfWork) -> None:
        self.guide_repository = guide_repository
        self.uow = uow

    def add_challenge(
        self, caller: Caller, guide_id: UUID | str, challenge_id: UUID | str
    ) -> Guide:
        """
        Relate a challenge to a guide.

        Raises:
            BusinessRuleViolationError: If the challenge is already related
        """
        challenge_id_vo = ChallengeId.parse(challenge_id)

        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            guide.add_challenge(challenge_id_vo)
            self.guide_repository.save(guide)
            self.uow.track(guide)
            self.uow.commit()

        logger.info(
            "added_guide_challenge", guide_id=str(guide.id), challenge_id=str(challenge_id_vo)
        )
        return guide

    def remove_challenge(
        self, caller: Caller, guide_id: UUID | str, challenge_id: UUID | str
    ) -> Guide:
        """
        Remove a challenge from a guide.

        Raises:
            ChallengeNotFoundError: If the challenge is not related to the guide
        """
        challenge_id_vo = ChallengeId.parse(challenge_id)

        with self.uow:
            guide = load_modifiable_guide(self.guide_repository, caller, guide_id)
            guide.remove_challenge(challenge_id_vo)
            self.guide_repository.save(guide)
            self.uow.commit()

        logger.info(
            "removed_guide_challenge", guide_id=str(guide.id), challenge_id=str(challenge_id_vo)
        )
        return guide
