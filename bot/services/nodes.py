# services/nodes.py
import json
import aiohttp
import logging
from dataclasses import dataclass


NODES_API_URL = "https://lavainfo-api.deno.dev/nodes"



class NodeDiscoveryError(Exception):
    """The audio-node discovery endpoint could not provide a node list."""



@dataclass(frozen=True)
class NodeDescriptor:
    name: str
    url: str
    auth: str
    secure: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> "NodeDescriptor":
        try:
            return cls(
                name=str(data["name"]),
                url=str(data["url"]),
                auth=str(data["auth"]),
                secure=bool(data.get("secure", False)),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"Invalid node descriptor {data!r}: {e}") from e



def parse_nodes(raw) -> list[NodeDescriptor]:

    """
    Builds node descriptors from a JSON string or an already decoded list.

    Args:
        raw (str | list[dict]): Node list in the shoukaku format ({name, url, auth, secure}).

    Returns:
        list[NodeDescriptor]: The parsed nodes, in the given order.
    """

    if isinstance(raw, str):
        raw = json.loads(raw) if raw.strip() else []
    if not isinstance(raw, list):
        raise ValueError("Node list must be a JSON array")
    return [NodeDescriptor.from_dict(node) for node in raw]



async def fetch_nodes(session: aiohttp.ClientSession, url: str = NODES_API_URL) -> list[NodeDescriptor]:

    """
    Retrieves public audio nodes from the discovery endpoint.

    There is no fallback list: any failure is raised so that startup stops.

    Args:
        session (aiohttp.ClientSession): The active asynchronous HTTP session.
        url (str): Discovery endpoint.

    Returns:
        list[NodeDescriptor]: The discovered nodes.

    Raises:
        NodeDiscoveryError: On HTTP errors, network errors or a malformed payload.
    """

    params = {
        "ssl": "false",
        "version": "v4",
        "format": "shoukaku",
    }
    headers = {"Content-Type": "application/json"}

    try:
        async with session.get(url, params=params, headers=headers) as resp:
            if resp.status != 200:
                text = await resp.text()
                raise NodeDiscoveryError(f"{resp.status}: {text[:200]}")
            data = await resp.json()
    except NodeDiscoveryError:
        raise
    except Exception as e:
        raise NodeDiscoveryError(f"Node discovery request failed: {e}") from e

    try:
        nodes = parse_nodes(data)
    except ValueError as e:
        raise NodeDiscoveryError(str(e)) from e

    logging.info(f"🎧 Discovered {len(nodes)} audio nodes")
    return nodes
