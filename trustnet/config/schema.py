"""Configuration schema using Pydantic."""

from typing import Optional
from pydantic import BaseModel, Field

DEFAULT_SAMPLES = 10


class ExperimentConfig(BaseModel):
    """Run-level configuration."""
    name: str = Field(default="trustnet", description="Run name")
    seed: Optional[int] = Field(default=None, description="Random seed for pair sampling")
    verbose: bool = Field(default=False, description="Enable verbose logging")


class InputConfig(BaseModel):
    """Edge-list input configuration."""
    path: str = Field(description="Path to the comma-separated edge list")
    skip_invalid: bool = Field(
        default=False,
        description="Skip lines with non-integer fields instead of aborting"
    )


class SamplingConfig(BaseModel):
    """Average-distance sampling configuration."""
    samples: int = Field(default=DEFAULT_SAMPLES, ge=0, description="Number of random vertex pairs to draw")


class OutputConfig(BaseModel):
    """Report and plot output configuration."""
    directory: str = Field(default=".", description="Directory for generated plots")
    plots: bool = Field(default=True, description="Write plot images")
    degree_histogram: str = Field(
        default="degree_distribution_histogram.png",
        description="Degree histogram file name"
    )
    trust_scatter: str = Field(
        default="trust_vs_degree.png",
        description="Trust vs degree scatter file name"
    )
    max_degree: int = Field(default=120, gt=0, description="Upper bound of the histogram degree axis")


class Config(BaseModel):
    """Main configuration object."""
    experiment: ExperimentConfig = Field(default_factory=ExperimentConfig)
    input: InputConfig
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    class Config:
        """Pydantic configuration."""
        extra = "forbid"  # Raise error on unknown fields
