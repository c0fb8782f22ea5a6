import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from blochsim.hamiltonian import HBAR, Hamiltonian
from blochsim.qubit import Qubit
from blochsim.state import BlochVector
from blochsim.viz import plot_bloch_sphere, plot_trajectory


def test_plot_bloch_sphere_returns_figure():
    q = Qubit(BlochVector(0.4, 1.0, 1.0))
    fig = plot_bloch_sphere(q, title="test")

    assert len(fig.axes) == 1
    assert fig.axes[0].get_title() == "test"
    plt.close(fig)


def test_plot_trajectory_evolves_the_qubit():
    q = Qubit(BlochVector(theta=0.0, phi=np.pi / 2, r=1.0))
    h = Hamiltonian(0.0, 0.0)

    fig = plot_trajectory(q, h, dt=0.1 / HBAR, steps=10)

    assert np.isclose(q.expectation_pauli("X"), np.cos(1.0), atol=1e-9)
    plt.close(fig)
