"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["keys", "persistence"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick implementations.

    A provider naming a ``__mock_component__`` is swappable: its subclasses
    are the production and mock implementations, told apart by
    ``__is_mock__``. A provider without subclasses is used as it is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementation(cls, mock: bool = False) -> type["ProviderBase"]:
        """Return the provider class to instantiate for this slot.

        Raises:
            ValueError: If the component has no implementation of that kind
        """
        implementations = cls.__subclasses__()
        if not implementations:
            return cls

        for impl in implementations:
            if impl.__is_mock__ == mock:
                return impl

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
