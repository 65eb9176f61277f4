# Typer imports its rich error formatter lazily. Tests that use
# mock.patch.dict(sys.modules, ...) would otherwise drop those modules on exit,
# and a later re-import yields duplicate rich classes. Load them up front.
import typer.rich_utils  # noqa: F401
