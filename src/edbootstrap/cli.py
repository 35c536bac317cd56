"""Console entry points for the two bootstrap executables."""

import logging
import sys

from edbootstrap.config import EDLAUNCHER, MIN_EDLAUNCHER, error_log_path, get_log_level
from edbootstrap.errorlog import write_error
from edbootstrap.errors import BootstrapError
from edbootstrap.launcher import build_request, run
from edbootstrap.models import BootstrapVariant


def main(argv: list[str] | None = None, variant: BootstrapVariant = EDLAUNCHER) -> int:
    """Forward ``argv`` untouched to the variant's target executable."""
    args = list(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=get_log_level(),
        format="%(name)s %(levelname)s: %(message)s",
    )

    request = build_request(variant, args)
    try:
        return run(request)
    except BootstrapError as e:
        print(f"Error: {e}", file=sys.stderr)
        log_path = error_log_path(variant)
        if log_path is not None:
            write_error(log_path, variant.target, e.message)
        return 1


def entrypoint() -> None:
    """Console script entrypoint for the EdLauncher bootstrap."""
    raise SystemExit(main())


def min_entrypoint() -> None:
    """Console script entrypoint for the MinEdLauncher bootstrap."""
    raise SystemExit(main(variant=MIN_EDLAUNCHER))
