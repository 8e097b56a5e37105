"""Build a SocialNetwork from a TOML seed file.

Example:

    [[users]]
    name = "amy"
    password = "Secret@123"
    city = "Lahore"

    [[follows]]
    from = "amy"
    to = "bob"
    accept = true
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from orbit.config.models import OrbitConfig
from orbit.errors import OrbitError
from orbit.network import SocialNetwork

logger = logging.getLogger(__name__)


class SeedError(ValueError):
    """Seed file could not be loaded."""


class SeedUser(BaseModel):
    name: str = Field(min_length=1)
    password: str
    city: str = ""
    recovery_question: str = ""
    recovery_answer: str = ""


class SeedFollow(BaseModel):
    """A follow request, accepted immediately when ``accept`` is set."""

    model_config = ConfigDict(populate_by_name=True)

    requester: str = Field(alias="from")
    target: str = Field(alias="to")
    accept: bool = False


class SeedFile(BaseModel):
    users: list[SeedUser] = Field(default_factory=list)
    follows: list[SeedFollow] = Field(default_factory=list)


def parse_seed(path: Path) -> SeedFile:
    """Parse and validate a seed file.

    Raises:
        SeedError: If the file is missing, not TOML, or fails validation.
    """
    if not path.exists():
        raise SeedError(f"Seed file not found: {path}")
    try:
        with path.open("rb") as f:
            raw = tomllib.load(f)
        return SeedFile.model_validate(raw)
    except tomllib.TOMLDecodeError as e:
        raise SeedError(f"Invalid TOML in {path}: {e}") from e
    except ValidationError as e:
        raise SeedError(f"Invalid seed file {path}:\n{e}") from e


def build_network(seed: SeedFile, config: OrbitConfig) -> SocialNetwork:
    """Replay signups and follow requests from a parsed seed.

    Raises:
        SeedError: If a user cannot be created or a follow names an
            unknown user.
    """
    network = SocialNetwork.from_config(config)

    for entry in seed.users:
        try:
            network.signup(
                entry.name,
                entry.password,
                entry.recovery_question,
                entry.recovery_answer,
                entry.city,
            )
        except OrbitError as e:
            raise SeedError(f"Cannot create user '{entry.name}': {e}") from e

    for follow in seed.follows:
        requester = network.find_user(follow.requester)
        target = network.find_user(follow.target)
        if requester is None or target is None:
            missing = follow.requester if requester is None else follow.target
            raise SeedError(f"Follow references unknown user '{missing}'")
        network.send_follow_request(requester, target)
        if follow.accept:
            # The request just sent is the newest pending entry
            network.accept_follow_request(target, len(target.pending_requests))

    logger.debug(
        "seed_loaded",
        extra={"users": len(seed.users), "follows": len(seed.follows)},
    )
    return network


def load_network(path: Path, config: OrbitConfig) -> SocialNetwork:
    return build_network(parse_seed(path), config)
