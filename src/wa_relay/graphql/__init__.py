from .client import GraphQLClient, RECEIVE_MESSAGE_MUTATION

__all__ = ["GraphQLClient", "RECEIVE_MESSAGE_MUTATION"]
