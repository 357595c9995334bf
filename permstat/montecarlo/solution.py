"""
Solution wrapper for permutation test results.

PermutationSolution wraps Result[PermutationParams] and provides
convenient accessors and a plain-text report.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from permstat.core.result import Result
from permstat.montecarlo._common import PermutationParams
from permstat.montecarlo._pvalue import evidence_label

if TYPE_CHECKING:
    from permstat.montecarlo.design import PermutationDesign


@dataclass
class PermutationSolution:
    """
    User-facing permutation test results.

    Provides the observed statistic, both group means, the extreme count
    and the smoothed p-value, so an output layer never recomputes them.
    """
    _result: Result[PermutationParams]
    _design: 'PermutationDesign'

    # --- Core fields ---

    @property
    def observed_statistic(self) -> float:
        """mean(treatment) - mean(control) on the real labeling."""
        return self._result.params.observed_stat

    @property
    def observed_stat(self) -> float:
        return self.observed_statistic

    @property
    def mean_control(self) -> float:
        return self._result.params.mean_control

    @property
    def mean_treatment(self) -> float:
        return self._result.params.mean_treatment

    @property
    def extreme_count(self) -> int:
        """Trials whose |statistic| was at least |observed_statistic|."""
        return self._result.params.extreme_count

    @property
    def p_value(self) -> float:
        """Permutation p-value, (extreme_count + 1) / (trials + 1)."""
        return self._result.params.p_value

    @property
    def trials(self) -> int:
        return self._result.params.trials

    @property
    def R(self) -> int:
        """Number of permutations (alias of trials)."""
        return self.trials

    @property
    def p_value_se(self) -> float:
        """Monte Carlo standard error of p_value."""
        return self._result.params.p_value_se

    @property
    def conf_int(self) -> tuple[float, float]:
        """Clopper-Pearson interval for the exact permutation p-value."""
        return self._result.params.conf_int

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    @property
    def evidence(self) -> str:
        """Conventional wording for the p-value."""
        return evidence_label(self.p_value)

    # --- Metadata ---

    @property
    def n_control(self) -> int:
        return self._design.samples.n_control

    @property
    def n_treatment(self) -> int:
        return self._design.samples.n_treatment

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    # --- Display ---

    def summary(self) -> str:
        """
        Aligned report of means, sizes, statistic and p-value.

        Produces:
                             mu_control = 56.22222222222222
                              N_control = 9
                           mu_treatment = 86.85714285714286
                            N_treatment = 7
            (mu_treatment - mu_control) = 30.63492063492064
                                 trials = 1000000
                                p-value = 0.139464
                        95% MC interval = (0.138785, 0.140142)
                                 result = no evidence against null hypothesis
        """
        lo, hi = self.conf_int
        conf_pct = int(round(self.conf_level * 100))
        rows = [
            ("mu_control", repr(self.mean_control)),
            ("N_control", str(self.n_control)),
            ("mu_treatment", repr(self.mean_treatment)),
            ("N_treatment", str(self.n_treatment)),
            ("(mu_treatment - mu_control)", repr(self.observed_statistic)),
            ("trials", str(self.trials)),
            ("p-value", f"{self.p_value:.6g}"),
            (f"{conf_pct}% MC interval", f"({lo:.6g}, {hi:.6g})"),
            ("result", self.evidence),
        ]
        width = max(len(label) for label, _ in rows)
        return "\n".join(f"{label:>{width}s} = {value}" for label, value in rows)

    def __repr__(self) -> str:
        return (
            f"PermutationSolution(trials={self.trials}, "
            f"observed={self.observed_statistic:.4g}, "
            f"p_value={self.p_value:.4g})"
        )
