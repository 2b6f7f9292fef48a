"""Community use scenario: many requesters, a few owners, advancing blocks."""

import logging
from dataclasses import dataclass, field

from property_use.config import PropertyUseConfig
from property_use.contract import TemporaryUseContract
from property_use.exceptions import ConfigurationError
from property_use.generators import PropertyGenerator, UseRequestGenerator
from property_use.models import Err
from property_use.registry import InMemoryPropertyRegistry

logger = logging.getLogger(__name__)


@dataclass
class ScenarioOutcome:
    """Counts of what happened during a scenario run."""

    requested: int = 0
    approved: int = 0
    rejected: dict[str, int] = field(default_factory=dict)
    final_height: int = 0

    def reject(self, err: Err) -> None:
        name = err.code.name
        self.rejected[name] = self.rejected.get(name, 0) + 1


class CommunityUseScenario:
    """Simulate temporary use requests against a generated registry.

    Properties are registered up front. Each round advances the block
    height, files a request against every property (non-vacant ones are
    rejected by the workflow), lets the owner approve a share of the
    accepted requests and lets a stranger try to approve some others.
    """

    def __init__(
        self,
        num_properties: int = 10,
        requests_per_property: int = 5,
        vacancy_rate: float = 0.7,
        approval_rate: float = 0.5,
        intrusion_rate: float = 0.1,
        start_height: int = 100,
        blocks_per_request: int = 1,
        seed: int | None = None,
        name: str = "community-use",
        contract: TemporaryUseContract | None = None,
    ) -> None:
        """Initialize community use scenario.

        Parameters
        ----------
        num_properties : int
            Number of properties to register.
        requests_per_property : int
            Rounds of requests; one request per property per round.
        vacancy_rate : float
            Share of properties registered as vacant.
        approval_rate : float
            Share of accepted requests the owner approves.
        intrusion_rate : float
            Share of accepted requests a non-owner tries to approve.
        start_height : int
            Block height of the first round.
        blocks_per_request : int
            Blocks the height advances after each round.
        seed : int | None
            Random seed for reproducibility.
        name : str
            Label used in log lines.
        contract : TemporaryUseContract | None
            Contract to run against. Its registry must be an
            ``InMemoryPropertyRegistry``. A fresh one is built when omitted.
        """
        self.name = name
        self.num_properties = num_properties
        self.requests_per_property = requests_per_property
        self.approval_rate = approval_rate
        self.intrusion_rate = intrusion_rate
        self.start_height = start_height
        self.blocks_per_request = blocks_per_request
        self.seed = seed

        self.contract = contract or TemporaryUseContract(InMemoryPropertyRegistry())
        self.registry: InMemoryPropertyRegistry = self.contract.registry
        self.outcome = ScenarioOutcome(final_height=start_height)
        self._generated = False

        self._property_gen = PropertyGenerator(seed=seed, vacancy_rate=vacancy_rate)
        self._request_gen = UseRequestGenerator(seed=seed)

    @classmethod
    def from_config(cls, config: PropertyUseConfig) -> "CommunityUseScenario":
        """Build a scenario from ``config.scenario`` seeded with ``config.seed``.

        The contract is built with ``TemporaryUseContract.from_config`` so
        the configured topic and logging apply.
        """
        if config.scenario is None:
            raise ConfigurationError("No scenario configured")
        scenario = config.scenario
        return cls(
            num_properties=scenario.num_properties,
            requests_per_property=scenario.requests_per_property,
            vacancy_rate=scenario.vacancy_rate,
            approval_rate=scenario.approval_rate,
            intrusion_rate=scenario.intrusion_rate,
            start_height=scenario.start_height,
            blocks_per_request=scenario.blocks_per_request,
            seed=config.seed,
            name=scenario.name,
            contract=TemporaryUseContract.from_config(config, InMemoryPropertyRegistry()),
        )

    def generate(self) -> TemporaryUseContract:
        """Run the scenario once.

        Later calls return the same contract without registering or
        requesting anything more.

        Returns
        -------
        TemporaryUseContract
            Contract holding every request and audit event produced.
        """
        if self._generated:
            logger.warning("Scenario %s already ran, returning its contract", self.name)
            return self.contract
        self._generated = True

        logger.info(
            "Starting scenario %s: %d properties, %d rounds",
            self.name,
            self.num_properties,
            self.requests_per_property,
        )

        for prop in self._property_gen.generate_batch(self.num_properties, self.start_height):
            self.registry.register(prop)

        height = self.start_height
        for _ in range(self.requests_per_property):
            for property_id in list(self.registry.properties):
                self._run_request(property_id, height)
            height += self.blocks_per_request

        self.outcome.final_height = height
        logger.info(
            "Scenario %s complete: %d requested, %d approved, rejected=%s",
            self.name,
            self.outcome.requested,
            self.outcome.approved,
            self.outcome.rejected,
        )
        return self.contract

    def _run_request(self, property_id: int, height: int) -> None:
        draft = self._request_gen.generate()
        result = self.contract.request_temporary_use(
            property_id, draft.purpose, draft.duration, draft.requester, height
        )
        if isinstance(result, Err):
            self.outcome.reject(result)
            return
        self.outcome.requested += 1
        use_id = result.value
        rng = self._request_gen.rng

        if rng.random() < self.intrusion_rate:
            approval = self.contract.approve_temporary_use(
                property_id, use_id, self._request_gen.principal()
            )
            if isinstance(approval, Err):
                self.outcome.reject(approval)

        if rng.random() < self.approval_rate:
            owner = self.registry.properties[property_id].owner
            self.contract.approve_temporary_use(property_id, use_id, owner)
            self.outcome.approved += 1
