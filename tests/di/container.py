"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container

from forum.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components default to their mocks.

    Args:
        unmock: Components that should use the production implementation.
                ``{"persistence"}`` needs PostgreSQL at DATABASE__URL with
                migrations applied.

    Returns:
        Configured test container

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and E2E tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real persistence
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        provider_instances.append(get_provider(base, use_mock=use_mock)())

    return make_async_container(*provider_instances)


def _validate_unmock(unmock: set[Component]) -> None:
    known = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}
    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
