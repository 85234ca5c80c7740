"""Activations, dense layers, cross-entropy loss, early stopping and toy data generation."""