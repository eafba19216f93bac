# advisor/proxy_client.py
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
import httpx

from advisor.errors import RemoteUnavailable
from advisor.models import HardwareDescriptor, Verdict
from advisor.remote_verdict import build_prompt, verdict_from_payload

logger = logging.getLogger(__name__)

class ProxyAdapter:
    def __init__(self):
        self.adapter_name = "Compatibility Proxy Adapter"

    async def post(self, url: str, payload: dict, timeout: float):
        """A standardized POST wrapper for the compatibility proxy, one short-lived client per call."""
        try:
            async with httpx.AsyncClient(timeout=timeout) as client:
                response = await client.post(url, json=payload)
            logger.info(f"[{self.adapter_name}] POST {url} -> status {response.status_code}")
            return response
        except Exception as e:
            logger.error(f"[{self.adapter_name}] Error posting to {url}: {e}")
            raise e

# Provide a singleton instance for use in other modules.
proxy_adapter = ProxyAdapter()

async def request_remote_verdict_async(descriptor: HardwareDescriptor, url: str, timeout: float) -> Verdict:
    payload = {"prompt": build_prompt(descriptor)}
    try:
        response = await proxy_adapter.post(url, payload, timeout=timeout)
    except httpx.HTTPError as e:
        raise RemoteUnavailable(f"Proxy request failed: {e}") from e

    if not 200 <= response.status_code < 300:
        raise RemoteUnavailable(f"Proxy returned status {response.status_code}")
    try:
        body = response.json()
    except ValueError as e:
        raise RemoteUnavailable(f"Proxy returned a malformed body: {e}") from e
    return verdict_from_payload(body)

def request_remote_verdict(descriptor: HardwareDescriptor, url: str, timeout: float) -> Verdict:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(request_remote_verdict_async(descriptor, url, timeout))

    # A loop is already running in this thread: send the request from a worker thread with its own loop.
    logger.info("Event loop already running; sending proxy request from a worker thread.")
    with ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(asyncio.run, request_remote_verdict_async(descriptor, url, timeout))
        return future.result()
