"""
Substitution model selector.
"""

from enum import Enum


class Model(str, Enum):
    """
    Evolutionary distance model.

    Every member states whether its estimator reads the no-change
    categories only through their sum. For those models anchors are
    counted with the constant-time split of
    :meth:`MutationMatrix.count_equal`; all other models get exact
    per-nucleotide counts.
    """

    RAW = "raw"
    JC = "jc"
    KIMURA = "kimura"
    LOGDET = "logdet"

    @property
    def aggregate_identity(self) -> bool:
        """True if the estimator uses no-change counts only in aggregate."""
        return self in _AGGREGATE_IDENTITY_MODELS

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, name) -> "Model":
        """
        Look up a model by name (case-insensitive).

        Parameters
        ----------
        name : str or Model
            Model name such as 'jc', 'Kimura' or 'RAW'

        Returns
        -------
        Model

        Raises
        ------
        ValueError
            If the name matches no model
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for model in cls:
            if model.value == key:
                return model
        valid = ', '.join(m.value for m in cls)
        raise ValueError(f"Unknown model '{name}'. Valid models: {valid}")


_AGGREGATE_IDENTITY_MODELS = frozenset({Model.RAW, Model.JC, Model.KIMURA})

_DESCRIPTIONS = {
    Model.RAW: "Uncorrected substitution rate (p-distance)",
    Model.JC: "Jukes-Cantor (1969) correction",
    Model.KIMURA: "Kimura two-parameter (K80) correction",
    Model.LOGDET: "LogDet / paralinear distance",
}
