from pydfm.main import main

raise SystemExit(main())
