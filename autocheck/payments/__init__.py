"""
Module 'payments' (feature-first): checkout, métadonnées Stripe, client Stripe, service et vues.
"""
