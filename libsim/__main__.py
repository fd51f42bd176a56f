from libsim.cli import main

main()
