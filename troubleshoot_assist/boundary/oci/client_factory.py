"""
OCI Generative AI inference client factory.

Reads the OCI credential file and builds an authenticated
GenerativeAiInferenceClient bound to the configured regional endpoint.

Dependencies: oci, troubleshoot_assist.configs
System role: Inference client construction and teardown
"""

import logging

import oci
from oci.generative_ai_inference import GenerativeAiInferenceClient

from troubleshoot_assist.configs import OCIGenAISettings
from troubleshoot_assist.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_inference_client(settings: OCIGenAISettings) -> GenerativeAiInferenceClient:
    """
    Create an authenticated Generative AI inference client.

    Args:
        settings: OCI Generative AI settings

    Returns:
        GenerativeAiInferenceClient: Client with no retry strategy and the
        configured connect/read timeouts

    Raises:
        ConfigurationError: When the credential file is missing, the profile
            does not exist, or the configuration is invalid
    """
    try:
        config = oci.config.from_file(
            file_location=settings.config_location,
            profile_name=settings.config_profile,
        )
        oci.config.validate_config(config)

        client = GenerativeAiInferenceClient(
            config,
            service_endpoint=settings.endpoint,
            retry_strategy=oci.retry.NoneRetryStrategy(),
            timeout=(
                settings.connect_timeout_ms / 1000,
                settings.read_timeout_ms / 1000,
            ),
        )
    except (oci.exceptions.ClientError, OSError) as e:
        raise ConfigurationError(
            f"Failed to load OCI configuration: {e}",
            config_location=settings.config_location,
            profile=settings.config_profile,
        ) from e

    logger.info(
        f"{__name__}:create_inference_client - Connected to {settings.endpoint} "
        f"(profile={settings.config_profile})"
    )
    return client


def close_inference_client(client: GenerativeAiInferenceClient) -> None:
    """
    Release the HTTP session held by the inference client.

    Args:
        client: Client created by create_inference_client
    """
    client.base_client.session.close()
    logger.debug(f"{__name__}:close_inference_client - Session closed")
