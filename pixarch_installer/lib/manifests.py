from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_CORE_PACKAGES = [
    "go", "vim", "htop", "firefox", "xorg-server", "xorg-xinit", "xorg-xrdb", "xorg-xprop",
    "rofi", "exa", "pavucontrol", "tmux", "pamixer", "fzf", "xdg-user-dirs", "plank", "sddm", "lf",
    "feh", "git", "openssh", "alacritty", "picom", "polybar", "dash", "xss-lock", "dialog", "dex",
]
DEFAULT_CONFIGS = ["alacritty", "lf", "picom", "polybar", "rofi", "rofi-power-menu", "vim"]
DEFAULT_WINDOW_MANAGERS = {
    "i3": {"package": "i3-wm", "flavour": "flavours/i3"},
    "qtile": {"package": "qtile", "flavour": "flavours/qtile"},
}


SECTIONS = ("pacman", "aur", "window_managers", "themes", "browsel", "security")


def default_manifest_path() -> Path:
    return Path(__file__).resolve().parents[1] / "manifests" / "packages.yaml"


def _section(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a mapping")
    return value


def _str_list(value: Any, default: List[str], what: str) -> List[str]:
    if value is None:
        return list(default)
    if not isinstance(value, list):
        raise ValueError(f"{what} must be a list")
    return [str(v).strip() for v in value if str(v).strip()]


@dataclass(frozen=True)
class WindowManager:
    name: str
    package: str
    flavour: str


@dataclass(frozen=True)
class Manifest:
    raw: Dict[str, Any]

    @property
    def core_packages(self) -> List[str]:
        return _str_list(_section(self.raw, "pacman").get("core"), DEFAULT_CORE_PACKAGES, "pacman.core")

    @property
    def yay_repo(self) -> str:
        return str(_section(self.raw, "aur").get("yay_repo") or "https://aur.archlinux.org/yay.git")

    @property
    def aur_fonts(self) -> List[str]:
        return _str_list(_section(self.raw, "aur").get("fonts"), ["ttf-monocraft"], "aur.fonts")

    def window_manager(self, name: str) -> WindowManager:
        entry = _section(self.raw, "window_managers").get(name) or DEFAULT_WINDOW_MANAGERS.get(name)
        if not entry:
            raise KeyError(f"Unknown window manager: {name}")
        if not isinstance(entry, dict):
            raise ValueError(f"window_managers.{name} must be a mapping")
        return WindowManager(
            name=name,
            package=str(entry.get("package") or name),
            flavour=str(entry.get("flavour") or f"flavours/{name}"),
        )

    @property
    def configs(self) -> List[str]:
        return _str_list(self.raw.get("configs"), DEFAULT_CONFIGS, "configs")

    @property
    def grub_src(self) -> str:
        return str(_section(self.raw, "themes").get("grub_src") or "boot/grub/grubel")

    @property
    def grub_dest(self) -> str:
        return str(_section(self.raw, "themes").get("grub_dest") or "/boot/grub/")

    @property
    def grub_theme_file(self) -> str:
        return str(_section(self.raw, "themes").get("grub_theme_file") or "/boot/grub/grubel/theme.txt")

    @property
    def sddm_src(self) -> str:
        return str(_section(self.raw, "themes").get("sddm_src") or "boot/sddm/themes/pixarch_sddm")

    @property
    def sddm_dest(self) -> str:
        return str(_section(self.raw, "themes").get("sddm_dest") or "/usr/share/sddm/themes/")

    @property
    def sddm_conf(self) -> str:
        return str(_section(self.raw, "themes").get("sddm_conf") or "installation_scripts/theme.conf")

    @property
    def browsel_packages(self) -> List[str]:
        return _str_list(
            _section(self.raw, "browsel").get("packages"), ["searxng-git", "surf-git"], "browsel.packages"
        )

    @property
    def browsel_patch_dir(self) -> str:
        return str(_section(self.raw, "browsel").get("patch_dir") or "applications/browsel")

    @property
    def security_script(self) -> str:
        return str(_section(self.raw, "security").get("script") or "installation_scripts/security.sh")

    def validate(self) -> None:
        """Check every section and list now, so a bad manifest fails before any step runs."""
        for key in SECTIONS:
            _section(self.raw, key)
        for name in _section(self.raw, "window_managers"):
            self.window_manager(str(name))
        self.core_packages
        self.aur_fonts
        self.configs
        self.browsel_packages


def load_manifest(path: Optional[str] = None) -> Manifest:
    """Load the package manifest (the shipped one unless a path is given)."""

    p = Path(path).expanduser() if path else default_manifest_path()
    if not p.exists():
        raise FileNotFoundError(str(p))

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError(f"Manifest must be YAML: {p}")

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Manifest must be a mapping/dict: {p}")

    manifest = Manifest(raw=raw)
    manifest.validate()
    return manifest
