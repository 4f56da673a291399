"""OCI Generative AI inference client boundary."""

from troubleshoot_assist.boundary.oci.client_factory import (
    close_inference_client,
    create_inference_client,
)

__all__ = ["close_inference_client", "create_inference_client"]
