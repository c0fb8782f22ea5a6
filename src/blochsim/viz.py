import numpy as np 
import matplotlib.pyplot as plt 


def _sphere_axes(fig, title: str):
    ax = fig.add_subplot(111, projection="3d")

    u = np.linspace(0, 2*np.pi, 60) 
    t = np.linspace(0, np.pi, 60) 
    xs = np.outer(np.cos(u), np.sin(t)) 
    ys = np.outer(np.sin(u), np.sin(t))
    zs = np.outer(np.ones_like(u), np.cos(t))
    ax.plot_surface(xs, ys, zs, alpha=0.15, linewidth=0) 

    ax.plot([-1, 1], [0, 0], [0, 0])
    ax.plot([0, 0], [-1, 1], [0, 0])
    ax.plot([0, 0], [0, 0], [-1, 1])

    ax.set_xlim([-1, 1]); ax.set_ylim([-1, 1]); ax.set_zlim([-1, 1]) 
    ax.set_xlabel("X"); ax.set_ylabel("Y"); ax.set_zlabel("Z")
    ax.set_title(title)
    return ax


def plot_bloch_sphere(qubit, *, title: str = "bloch sphere"): 

    x, y, z = qubit.expectation_xyz()

    fig = plt.figure()
    ax = _sphere_axes(fig, title)
    ax.quiver(0, 0, 0, x, y, z, length=1.0, normalize=False) 

    plt.tight_layout()
    return fig 


def plot_trajectory(qubit, hamiltonian, dt: float, steps: int, *, title: str = "bloch trajectory"):
    """
    Evolve `qubit` under `hamiltonian` in `steps` increments of `dt` and 
    draw the path traced by its Bloch vector. The qubit is left evolved. 
    """
    if int(steps) != steps or steps <= 0: 
        raise ValueError(f"steps must be a positive integer, got {steps}") 

    path = [qubit.expectation_xyz()]
    for _ in range(int(steps)):
        qubit.evolve_step(hamiltonian, dt, 1)
        path.append(qubit.expectation_xyz())
    path = np.array(path, dtype=float)

    fig = plt.figure()
    ax = _sphere_axes(fig, title)
    ax.plot(path[:, 0], path[:, 1], path[:, 2])
    ax.scatter([path[0, 0]], [path[0, 1]], [path[0, 2]])
    ax.quiver(0, 0, 0, *path[-1], length=1.0, normalize=False) 

    plt.tight_layout()
    return fig 
