"""
Service context extraction for logging.

Identifies the running process in log lines so output from several operator
terminals or deployments can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'event-admin')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when deployed, PID for local development
    instance_id = os.getenv('HOSTNAME', '')[:8] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance_id}'
