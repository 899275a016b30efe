"""
Module 'notifications': gabarits d'emails, client SMTP et envoi après paiement.
"""
