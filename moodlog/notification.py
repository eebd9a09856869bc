"""Desktop notifications over the freedesktop notification service."""

import re
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

_SERVICE = "org.freedesktop.Notifications"
_OBJECT_PATH = "/org/freedesktop/Notifications"
_INTERFACE = "org.freedesktop.Notifications"


class NotificationError(RuntimeError):
    """Raised when the notification service cannot be reached or refuses."""


def _string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _string_array(values) -> str:
    if not values:
        return "@as []"
    return "[" + ", ".join(_string(value) for value in values) + "]"


def _variant(value) -> str:
    if isinstance(value, bool):
        inner = "true" if value else "false"
    elif isinstance(value, int):
        inner = f"int32 {value}"
    elif isinstance(value, float):
        inner = f"double {value!r}"
    elif isinstance(value, str):
        inner = _string(value)
    else:
        raise TypeError(f"unsupported hint value: {value!r}")
    return f"<{inner}>"


def _hints(hints) -> str:
    if not hints:
        return "@a{sv} {}"
    pairs = ", ".join(f"{_string(key)}: {_variant(value)}" for key, value in hints.items())
    return "{" + pairs + "}"


def _copy_icon(source: Path) -> str:
    with tempfile.NamedTemporaryFile(
        prefix="notificationIcon", suffix=source.suffix or ".png", delete=False
    ) as target, source.open("rb") as original:
        shutil.copyfileobj(original, target)
    return Path(target.name).resolve().as_uri()


@dataclass
class Notification:
    """A desktop notification and the means to show it."""

    app_name: str = ""
    replaces_id: int = 0
    icon: str = ""
    title: str = ""
    message: str = ""
    actions: list[str] = field(default_factory=list)
    hints: dict[str, object] = field(default_factory=dict)
    timeout: int = 3000

    def command(self, icon_path=None) -> list[str]:
        """Return the ``gdbus`` command line that shows this notification."""
        icon = self.icon if icon_path is None else icon_path
        return [
            "gdbus", "call", "--session",
            "--dest", _SERVICE,
            "--object-path", _OBJECT_PATH,
            "--method", f"{_INTERFACE}.Notify",
            _string(self.app_name),
            f"uint32 {self.replaces_id}",
            _string(icon),
            _string(self.title),
            _string(self.message),
            _string_array(self.actions),
            _hints(self.hints),
            f"int32 {self.timeout}",
        ]

    def send(self) -> int | None:
        """Show the notification; return the id the service assigned, if any."""
        icon_path = self.icon
        if self.icon and Path(self.icon).is_file():
            icon_path = _copy_icon(Path(self.icon))
        try:
            result = subprocess.run(
                self.command(icon_path), capture_output=True, text=True, check=False
            )
        except OSError as exc:
            raise NotificationError(f"cannot run gdbus: {exc}") from exc
        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            raise NotificationError(detail or f"gdbus exited with status {result.returncode}")
        match = re.search(r"uint32 (\d+)", result.stdout or "")
        return int(match.group(1)) if match else None