from .step_10_core_packages import CorePackagesStep
from .step_20_xdg_dirs import XdgDirsStep
from .step_30_aur_packages import AurPackagesStep
from .step_40_window_managers import WindowManagerStep
from .step_50_link_configs import LinkConfigsStep
from .step_60_themes import ThemesStep
from .step_70_browsel import BrowselStep
from .step_80_security import SecurityToolsStep

__all__ = [
    "CorePackagesStep",
    "XdgDirsStep",
    "AurPackagesStep",
    "WindowManagerStep",
    "LinkConfigsStep",
    "ThemesStep",
    "BrowselStep",
    "SecurityToolsStep",
]
