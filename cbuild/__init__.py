"""Build container images from git repositories and push them to ECR."""

__version__ = "0.1.0"
