"""EC2-backed cloud."""
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from src.domain.base.ports.cloud_port import CloudPort
from src.infrastructure.exceptions import CloudError, VmNotFoundError
from src.infrastructure.logging.logger import get_logger

NOT_FOUND_ERROR_CODES = ("InvalidInstanceID.NotFound", "InvalidInstanceID.Malformed")


class AwsCloud(CloudPort):
    """
    Cloud backed by EC2, where VM CIDs are EC2 instance ids.

    Args:
        region_name: AWS region name
        config: Optional settings (``retry_attempts``, ``connect_timeout_ms``,
            ``endpoint_url``)
    """

    def __init__(self, region_name: str, config: Optional[Dict[str, Any]] = None, name: str = ""):
        config = config or {}
        self.name = name
        self.region_name = region_name
        self._logger = get_logger(__name__)
        self.config = Config(
            region_name=region_name,
            retries={
                'max_attempts': config.get('retry_attempts', 3),
                'mode': 'standard'
            },
            connect_timeout=config.get('connect_timeout_ms', 1000) / 1000
        )
        self.ec2_client = boto3.client(
            'ec2', config=self.config, endpoint_url=config.get('endpoint_url')
        )

    def delete_vm(self, vm_cid: str) -> None:
        """Terminate the EC2 instance with the given id."""
        self._logger.info("Terminating instance", cpi=self.name, vm_cid=vm_cid)
        try:
            self.ec2_client.terminate_instances(InstanceIds=[vm_cid])
        except ClientError as e:
            code = e.response.get('Error', {}).get('Code', '')
            if code in NOT_FOUND_ERROR_CODES:
                raise VmNotFoundError(vm_cid, details={'code': code})
            raise CloudError(f"Failed to terminate instance {vm_cid}: {str(e)}", details={'code': code})
