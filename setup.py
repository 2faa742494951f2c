from setuptools import setup

setup(
    name="nx-wgraph",
    version="0.1.0",
    description="Weighted graph algorithms (Dijkstra, Floyd-Warshall, Prim, Kruskal) with a NetworkX backend",
    packages=["nx_wgraph"],
    python_requires=">=3.9",
    install_requires=[
        "networkx>=3.3",
        "numpy>=1.21",
        "scipy>=1.9",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "networkx.backends": ["wgraph = nx_wgraph.backend:backend"],
        "networkx.backend_info": ["wgraph = nx_wgraph.backend:get_info"],
    },
)
