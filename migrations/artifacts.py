"""
Compiled contract artifact lookup.

Accepts the JSON written by Truffle (build/contracts/<Name>.json) and by
Hardhat (artifacts/.../<Name>.json); both carry contractName, abi and bytecode.
"""

import os
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from .errors import ArtifactNotFoundError, InvalidArtifactError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Artifact:
    """Deployable contract descriptor"""
    contract_name: str
    abi: List[Dict[str, Any]]
    bytecode: str
    path: str


def contract_name_from_ref(ref: str) -> str:
    """'./ContactInfo.sol', 'ContactInfo.json' and 'ContactInfo' all name ContactInfo"""
    name = os.path.basename(ref.strip())
    stem, ext = os.path.splitext(name)
    if ext in ('.sol', '.json'):
        name = stem
    if not name:
        raise ArtifactNotFoundError(f"Empty artifact reference: {ref!r}")
    return name


class ArtifactResolver:
    """Resolves artifact references against a build directory"""

    def __init__(self, artifacts_dir: str):
        self.artifacts_dir = artifacts_dir
        self._cache: Dict[str, Artifact] = {}

    def require(self, ref: str) -> Artifact:
        """
        Load an artifact by reference

        Args:
            ref: Contract name, source path or JSON file name

        Returns:
            The resolved Artifact
        """
        name = contract_name_from_ref(ref)
        if name in self._cache:
            return self._cache[name]

        path = os.path.join(self.artifacts_dir, f"{name}.json")
        if not os.path.isfile(path):
            raise ArtifactNotFoundError(
                f"Could not find artifact for {ref!r} at {path}. Compile the contracts first."
            )

        artifact = self._load(name, path)
        self._cache[name] = artifact
        logger.debug(f"Loaded artifact {name} from {path}")
        return artifact

    def _load(self, name: str, path: str) -> Artifact:
        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise InvalidArtifactError(f"Could not read artifact {path}: {e}")

        if not isinstance(data, dict):
            raise InvalidArtifactError(f"Artifact {path} is not a JSON object")

        abi = data.get('abi')
        if not isinstance(abi, list):
            raise InvalidArtifactError(f"Artifact {path} has no ABI")

        bytecode = data.get('bytecode')
        # Raw solc standard-json output keeps the hex under bytecode.object
        if isinstance(bytecode, dict):
            bytecode = bytecode.get('object')
        if not isinstance(bytecode, str) or bytecode in ('', '0x'):
            raise InvalidArtifactError(
                f"Artifact {path} has no creation bytecode (abstract contract or interface?)"
            )
        if not bytecode.startswith('0x'):
            bytecode = '0x' + bytecode

        return Artifact(
            contract_name=data.get('contractName', name),
            abi=abi,
            bytecode=bytecode,
            path=path,
        )
