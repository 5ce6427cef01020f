"""Reconciliation of local and remote quote lists."""

from quotesync.reconcile.reconciler import Reconciler

__all__ = ["Reconciler"]
