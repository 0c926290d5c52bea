"""Console tools to build, run and inspect small C/C++ programs and their .test inputs."""

__version__ = "0.1.0"
__all__ = ["__version__"]