from .client import CryptoComRestClient

__all__ = ['CryptoComRestClient']
