import sys

from toy_robot_sim.cli.run import main

sys.exit(main())
