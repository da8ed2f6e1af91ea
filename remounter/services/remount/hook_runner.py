import asyncio
import logging

from ...core.exceptions import HookInvocationError


class HookRunner:
    """Runs the post-mount script through the platform shell."""

    async def run(self, command: str) -> int:
        """
        Run command and wait for it without a timeout. Returns its exit status.

        A non-zero exit is logged, not raised.

        :raises HookInvocationError: if the shell cannot be started
        """
        logging.info(f"Executing post-mount script: {command}")

        try:
            process = await asyncio.create_subprocess_shell(command)
        except OSError as e:
            raise HookInvocationError(command, e) from e

        returncode = await process.wait()
        if returncode != 0:
            logging.error(
                f"Post-mount script failed with status: {returncode}",
                extra={"operation": "post_mount_script", "returncode": returncode},
            )
        return returncode
