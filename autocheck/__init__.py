"""
Backend Clear Auto Check: sessions Stripe Checkout pour les rapports véhicule
et emails de confirmation après paiement.
"""
