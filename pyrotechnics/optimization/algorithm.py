# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import warnings
import pyrotechnics.common.typing as tp
from pyrotechnics.common import errors
from pyrotechnics.common import tools
from pyrotechnics.common.settings import Settings
from pyrotechnics.model import Firework
from pyrotechnics.model import Problem
from pyrotechnics.model import Solution
from . import explode
from . import sparks
from .elite import EliteStrategy
from .fitting import PolynomialFit
from .fitting import BoundedSolver
from .randomness import RandomSource
from .selection import BestFireworkSelector
from .selection import LocationSelector
from .state import AlgorithmState
from .stopping import StopCondition
from .stopping import FunctionStopCondition

logger = logging.getLogger(__name__)
_StepCallBack = tp.Callable[["FireworksAlgorithm", AlgorithmState], None]


class FireworksSettings(Settings):
    """Immutable settings of the Fireworks Algorithm (2012 version, with elite strategy)

    Parameters
    ----------
    locations_number: int
        [n] number of fireworks kept from one step to the next
    specific_sparks_number: int
        [m^] number of fireworks picked at each step to create specific sparks
    sampling_number: int
        number of best fireworks sampled by the elite strategy
    function_order: int
        order of the polynomial fitted by the elite strategy
    exploder: ExploderSettings
        settings of the explosion model
    """

    def __init__(
        self,
        locations_number: int = 5,
        specific_sparks_number: int = 5,
        sampling_number: int = 5,
        function_order: int = 2,
        exploder: tp.Optional[explode.ExploderSettings] = None,
    ) -> None:
        if locations_number < 1:
            raise errors.ConfigurationError(f"Number of locations must be at least 1 (got {locations_number})")
        if not 0 <= specific_sparks_number <= locations_number:
            raise errors.ConfigurationError(
                f"Number of specific sparks must be in [0, {locations_number}] (got {specific_sparks_number})"
            )
        if not 1 <= sampling_number <= locations_number:
            raise errors.ConfigurationError(
                f"Sampling number must be in [1, {locations_number}] (got {sampling_number})"
            )
        if function_order < 1:
            raise errors.ConfigurationError(f"Function order must be at least 1 (got {function_order})")
        if sampling_number <= function_order:
            warnings.warn(
                f"Sampling {sampling_number} fireworks is not enough to fit polynomials of order {function_order}, "
                "the elite strategy will never apply.",
                errors.InefficientSettingsWarning,
            )
        self._freeze(
            locations_number=int(locations_number),
            specific_sparks_number=int(specific_sparks_number),
            sampling_number=int(sampling_number),
            function_order=int(function_order),
            exploder=explode.ExploderSettings() if exploder is None else exploder,
        )

    locations_number: int
    specific_sparks_number: int
    sampling_number: int
    function_order: int
    exploder: explode.ExploderSettings

    def __repr__(self) -> str:
        # default exploder settings are provided as None
        config = self.as_dict()
        if config["exploder"] == explode.ExploderSettings():
            config["exploder"] = None
        diff = tools.different_from_defaults(instance=self, instance_dict=config)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        return f"{self.__class__.__name__}({params})"


class FireworksAlgorithm:
    """Fireworks Algorithm with elite strategy (2012 paper).

    Each step explodes all the fireworks into sparks, selects the locations of the
    next step among fireworks and sparks, then tries to replace the worst location
    by an elite point computed from the best ones.

    Parameters
    ----------
    problem: Problem
        problem to solve
    stop_condition: StopCondition or callable
        predicate on the state, stops the solve loop when True
    settings: FireworksSettings (optional)
        settings of the algorithm
    random_state: int, np.random.RandomState or RandomSource (optional)
        source of randomness, seed it for reproducible runs
    """

    def __init__(
        self,
        problem: Problem,
        stop_condition: tp.Union[StopCondition, tp.Callable[[AlgorithmState], bool]],
        settings: tp.Optional[FireworksSettings] = None,
        random_state: tp.Union[tp.Seed, RandomSource] = None,
    ) -> None:
        self.problem = problem
        self.stop_condition = (
            stop_condition if isinstance(stop_condition, StopCondition) else FunctionStopCondition(stop_condition)
        )
        self.settings = FireworksSettings() if settings is None else settings
        self.random = RandomSource.from_seed(random_state)
        dims = problem.dimensions
        self.exploder = explode.Exploder(self.settings.exploder, target=problem.target)
        self.initial_spark_generator = sparks.InitialSparkGenerator(dims, problem.initial_ranges, self.random)
        self.explosion_spark_generator = sparks.ExplosionSparkGenerator(dims, self.random)
        self.specific_spark_generator = sparks.GaussianSparkGenerator(dims, self.random)
        self.elite_spark_generator = sparks.EliteSparkGenerator(
            EliteStrategy(dims, PolynomialFit(self.settings.function_order), BoundedSolver())
        )
        self.location_selector = LocationSelector(problem, locations_number=self.settings.locations_number)
        self.sampling_selector = BestFireworkSelector(problem, locations_number=self.settings.sampling_number)
        self._callbacks: tp.Dict[str, tp.List[_StepCallBack]] = {}
        self.num_elite_replacements = 0
        self.num_fit_failures = 0

    @property
    def num_evaluations(self) -> int:
        """int: Number of quality evaluations performed on the problem."""
        return self.problem.num_evaluations

    def register_callback(self, name: str, callback: _StepCallBack) -> None:
        """Add a callback method called each time a new state is created.

        Parameters
        ----------
        name: str
            name of the method to register the callback for (only "step" is available)
        callback: callable
            a callable taking the algorithm and the new state as arguments
        """
        if name != "step":
            raise errors.InvalidArgumentError(f'Only "step" callbacks are available (got "{name}")')
        self._callbacks.setdefault(name, []).append(callback)

    def remove_all_callbacks(self) -> None:
        """Removes all registered callables"""
        self._callbacks = {}

    def _notify(self, state: AlgorithmState) -> None:
        for callback in self._callbacks.get("step", []):
            callback(self, state)

    def create_initial_state(self) -> AlgorithmState:
        """Creates and evaluates the initial fireworks (step 0)"""
        explosion = explode.InitialExplosion(0, self.settings.locations_number)
        fireworks = self.initial_spark_generator.create_sparks(explosion)
        self.problem.evaluate_fireworks(fireworks)
        state = AlgorithmState(0, fireworks, self.problem.get_best(fireworks).to_solution())
        logger.debug("Initial state: %s", state)
        self._notify(state)
        return state

    def make_step(self, state: AlgorithmState) -> AlgorithmState:
        """Performs one step of the algorithm and returns the new state
        (the provided state is not modified).
        """
        if not isinstance(state, AlgorithmState):
            raise errors.InvalidArgumentError(f"Expected an AlgorithmState but got {state!r}")
        step_number = state.step_number + 1
        settings = self.settings
        qualities = [fw.quality for fw in state.fireworks]
        specific_parents = set(
            self.random.unique_integers(settings.specific_sparks_number, 0, len(state.fireworks))
        )
        explosion_sparks: tp.List[Firework] = []
        specific_sparks: tp.List[Firework] = []
        for k, firework in enumerate(state.fireworks):
            explosion = self.exploder.explode(firework, qualities, step_number)
            explosion_sparks.extend(self.explosion_spark_generator.create_sparks(explosion))
            if k in specific_parents:
                specific_sparks.extend(self.specific_spark_generator.create_sparks(explosion))
        self.problem.evaluate_fireworks(explosion_sparks)
        self.problem.evaluate_fireworks(specific_sparks)
        selected = self.location_selector.select(list(state.fireworks) + explosion_sparks + specific_sparks)
        selected = self._apply_elite_strategy(selected, step_number)
        new_state = AlgorithmState(step_number, selected, self.problem.get_best(selected).to_solution())
        logger.debug(
            "Step %s: %s explosion sparks, %s specific sparks, best quality %s",
            step_number,
            len(explosion_sparks),
            len(specific_sparks),
            new_state.best_solution.quality,
        )
        self._notify(new_state)
        return new_state

    def _apply_elite_strategy(self, selected: tp.List[Firework], step_number: int) -> tp.List[Firework]:
        """Replaces the worst firework by the elite one if it is strictly better.
        The worst firework is removed and the elite one is appended last, the other
        fireworks keep their order.
        """
        worst = self.problem.get_worst(selected)
        samples = self.sampling_selector.select(selected)
        elite_explosion = explode.EliteExplosion(step_number, self.settings.sampling_number, samples)
        try:
            (elite,) = self.elite_spark_generator.create_sparks(elite_explosion)
        except errors.FitError as e:  # degenerate samples happen, the step goes on without elite
            self.num_fit_failures += 1
            logger.debug("Step %s: no elite firework (%s)", step_number, e)
            return selected
        self.problem.evaluate_firework(elite)
        if not self.problem.is_better(elite.quality, worst.quality):
            logger.debug("Step %s: elite quality %s does not beat worst %s", step_number, elite.quality, worst.quality)
            return selected
        self.num_elite_replacements += 1
        return [fw for fw in selected if fw is not worst] + [elite]

    def should_stop(self, state: AlgorithmState) -> bool:
        return bool(self.stop_condition.should_stop(state))

    def solve(self) -> Solution:
        """Runs the algorithm until the stop condition is satisfied and returns the best solution"""
        state = self.create_initial_state()
        while not self.should_stop(state):
            state = self.make_step(state)
        logger.info(
            "Stopped after %s steps and %s evaluations, best quality: %s",
            state.step_number,
            self.num_evaluations,
            state.best_solution.quality,
        )
        return state.best_solution

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.problem!r}, {self.settings!r})"

