from .base import StepCtx
from .step_10_check_toolchain import CheckToolchainStep
from .step_20_install_deps import InstallDepsStep
from .step_30_build_package import BuildPackageStep
from .step_40_install_extension import InstallExtensionStep

__all__ = [
    "StepCtx",
    "CheckToolchainStep",
    "InstallDepsStep",
    "BuildPackageStep",
    "InstallExtensionStep",
]
