from managing_system import TransportSystem

def main():
    """Main application entry point"""
    system = TransportSystem()   # Holds the vehicle, driver and passenger containers
    print("Welcome to the Transport System")

    running = True
    while running:
        system.display_menu()    # Show the menu options to the user
        try:
            choice = input("Select option (0-6): ")
            running = system.handle_choice(choice)
        except (EOFError, KeyboardInterrupt):
            # Input closed or interrupted mid-prompt: same as choosing Exit
            print()
            running = system.handle_choice("0")

# Ensure main() only runs if this script is executed directly
if __name__ == "__main__":
    main()
