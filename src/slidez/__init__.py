from typing import Any

app_name = "slidez"
__version__ = "0.1.0"


def __getattr__(name: str) -> Any:
    """Lazy-load attributes of the slidez package.

    This way of loading is required to avoid loading any code before some important \
    setup is done (such as logging setup). The entry point (the main function of the \
    slidez.cli.__init__ file) has to configure logging before the modules exposing \
    these attributes are imported, and loading slidez.cli.__init__ entails loading \
    slidez.__init__ first.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "create_navigation_state_machine":
            from .runtime.navigation import create_navigation_state_machine

            return create_navigation_state_machine
        case "create_transition_orchestrator":
            from .runtime.orchestrator import create_transition_orchestrator

            return create_transition_orchestrator
        case "get_transition" | "is_valid_transition_name":
            from .transitions import registry

            return getattr(registry, name)
        case "apply_visibility_mask" | "invert_visibility_mask":
            from .transitions import masking

            return getattr(masking, name)
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
